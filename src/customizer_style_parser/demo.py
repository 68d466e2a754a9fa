# src/customizer_style_parser/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: parse a styling instruction for a model and print the result."""
    from .extraction.part.catalog import model_names
    from .store import ColorStore, apply_style_text

    parser = argparse.ArgumentParser(
        prog="csp-demo",
        description="Parse a styling instruction into part → color assignments.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Instruction to parse (e.g. laces black, mesh white)",
    )
    parser.add_argument("--model", default="Shoe", help="Product model (default: Shoe)")
    parser.add_argument("--json", action="store_true", help="Print only the JSON result")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    text = " ".join(args.text) or "laces black, mesh white, stripes #ff0000"

    store = ColorStore.from_config()
    if args.model not in store.states:
        print(
            f"❌ Unknown model {args.model!r} (known: {', '.join(model_names())})",
            file=sys.stderr,
        )
        return 2
    store.select_model(args.model)

    outcome = apply_style_text(store, text)
    payload = outcome.result.as_dict()
    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    print(f"\n🎨 {args.model}: {text}\n")
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    print(f"\n{outcome.message}")
    if store.selected_part:
        print(f"Selected part: {store.selected_part}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

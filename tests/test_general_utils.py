# tests/test_general_utils.py
"""End-to-end tests for general utils (load_config, log) with cache/env handling."""

from __future__ import annotations

import io
import json
from importlib import import_module

import pytest

LC = import_module("customizer_style_parser.extraction.general.utils.load_config")
LOG = import_module("customizer_style_parser.extraction.general.utils.log")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via STYLE_PARSER_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv(LC.DATA_DIR_ENV, str(data))
    clear_config_cache()
    yield data
    clear_config_cache()


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")


# ---------- load_config ----------
def test_load_raw_and_set_modes(tmp_data_dir):
    _write(tmp_data_dir / "words.json", ["dark", "light", 3])
    assert load_config("words") == ["dark", "light", 3]
    assert load_config("words.json", mode="set") == frozenset({"dark", "light", "3"})


def test_validated_dict_with_validator(tmp_data_dir):
    _write(tmp_data_dir / "colors.json", {"red": "#f00"})

    def upper(d):
        return {k: v.upper() for k, v in d.items()}

    assert load_config("colors", mode="validated_dict", validator=upper) == {"red": "#F00"}


def test_validator_failure_is_parse_error(tmp_data_dir):
    _write(tmp_data_dir / "colors.json", {"red": "#f00"})

    def boom(d):
        raise ValueError("nope")

    with pytest.raises(ConfigParseError):
        load_config("colors", mode="validated_dict", validator=boom)


@pytest.mark.parametrize(
    "payload,mode",
    [({"a": 1}, "set"), (["a"], "validated_dict"), ([["nested"]], "set")],
)
def test_type_errors(tmp_data_dir, payload, mode):
    _write(tmp_data_dir / "bad.json", payload)
    with pytest.raises(ConfigTypeError):
        load_config("bad", mode=mode)


def test_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_missing_and_escaping_files(tmp_data_dir):
    with pytest.raises(ConfigFileNotFound):
        load_config("absent")
    with pytest.raises(ConfigFileNotFound):
        load_config("../outside")


def test_unknown_mode(tmp_data_dir):
    _write(tmp_data_dir / "x.json", [])
    with pytest.raises(ValueError):
        load_config("x", mode="weird")  # type: ignore[arg-type]


def test_cache_returns_same_object(tmp_data_dir):
    _write(tmp_data_dir / "m.json", {"a": 1})
    first = load_config("m", mode="validated_dict")
    assert load_config("m", mode="validated_dict") is first
    clear_config_cache()
    assert load_config("m", mode="validated_dict") is not first


def test_explicit_base_dir_wins(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    _write(other / "m.json", {"from": "other"})
    _write(tmp_data_dir / "m.json", {"from": "env"})
    assert load_config("m", base_dir=other) == {"from": "other"}
    assert load_config("m") == {"from": "env"}


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.delenv(LC.DATA_DIR_ENV, raising=False)
    data = tmp_path / "data"
    data.mkdir()
    _write(data / "stop_words.json", ["only"])
    with LC.temp_data_dir(data):
        assert load_config("stop_words", mode="set") == frozenset({"only"})
    assert "make" in load_config("stop_words", mode="set")


def test_data_dir_not_found(tmp_path, monkeypatch):
    monkeypatch.delenv(LC.DATA_DIR_ENV, raising=False)
    monkeypatch.setattr(LC, "_candidate_data_dirs", lambda start=None: [tmp_path / "nope"])
    with pytest.raises(DataDirNotFound):
        load_config("anything")


def test_shipped_data_dir_is_discovered(monkeypatch):
    monkeypatch.delenv(LC.DATA_DIR_ENV, raising=False)
    parts = load_config("model_parts", mode="validated_dict")
    assert parts["Teapot"] == ["lid", "base"]


# ---------- log ----------
@pytest.fixture
def topics(monkeypatch):
    def _set(value):
        monkeypatch.setenv(LOG.DEBUG_TOPICS_ENV, value)
        LOG.reload_topics()

    yield _set
    monkeypatch.delenv(LOG.DEBUG_TOPICS_ENV, raising=False)
    LOG.reload_topics()


def test_debug_prints_enabled_topic(topics):
    topics("parse")
    buf = io.StringIO()
    LOG.debug("hello", topic="Parse", stream=buf)
    LOG.debug("muted", topic="other", stream=buf)
    out = buf.getvalue()
    assert "[parse][DEBUG] hello" in out
    assert "muted" not in out


def test_debug_all_and_silent(topics):
    topics("all")
    buf = io.StringIO()
    LOG.debug("x", topic="anything", level="info", stream=buf)
    assert "[anything][INFO] x" in buf.getvalue()

    topics("")
    buf = io.StringIO()
    LOG.debug("y", stream=buf)
    assert buf.getvalue() == ""


def test_is_enabled(topics):
    topics(" Parse , store")
    assert LOG.is_enabled("parse") and LOG.is_enabled("STORE ")
    assert not LOG.is_enabled("other")
    topics("")
    assert not LOG.is_enabled("parse")


def test_orchestrator_emits_clause_trace(topics, capsys):
    from customizer_style_parser.extraction import parse_for_model

    topics("parse")
    parse_for_model("laces black", "Shoe")
    err = capsys.readouterr().err
    assert "[parse][DEBUG]" in err and "laces black" in err


# ---------- shipped table validators ----------
def test_default_colors_are_canonicalized(tmp_data_dir):
    from customizer_style_parser.extraction.part.catalog import get_default_colors

    _write(tmp_data_dir / "model_parts.json", {"Mug": ["body", "handle"]})
    _write(tmp_data_dir / "model_aliases.json", {"Mug": {"grip": "handle"}})
    _write(tmp_data_dir / "default_colors.json", {"Mug": {"body": "abc"}})
    assert get_default_colors("Mug") == {"body": "#AABBCC", "handle": "#FFFFFF"}


@pytest.mark.parametrize(
    "table,payload",
    [
        ("default_colors", {"Mug": {"body": "#GGGGGG"}}),
        ("default_colors", {"Mug": ["#FFFFFF"]}),
        ("model_parts", {"Mug": "body"}),
        ("model_aliases", {"Mug": {"grip": 3}}),
    ],
)
def test_bad_model_tables_are_rejected(tmp_data_dir, table, payload):
    from customizer_style_parser.extraction.part.catalog import get_default_colors

    files = {
        "model_parts": {"Mug": ["body"]},
        "model_aliases": {"Mug": {}},
        "default_colors": {"Mug": {"body": "#FFFFFF"}},
    }
    files[table] = payload
    for name, content in files.items():
        _write(tmp_data_dir / f"{name}.json", content)
    with pytest.raises(ConfigParseError):
        get_default_colors("Mug")


def test_color_map_validator(tmp_data_dir):
    from customizer_style_parser.extraction.color import vocab

    _write(tmp_data_dir / "color_map.json", {"Sky  Blue": "#60a5fa"})
    checked = load_config("color_map", mode="validated_dict", validator=vocab._check_color_map)
    assert checked == {"sky blue": "#60A5FA"}

    _write(tmp_data_dir / "bad_colors.json", {"mud": "brownish"})
    with pytest.raises(ConfigParseError):
        load_config("bad_colors", mode="validated_dict", validator=vocab._check_color_map)

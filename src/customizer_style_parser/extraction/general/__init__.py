"""
general.
=======

Shared general-purpose modules used across the parsing pipeline.

Exports:
- ParseResult, ColorToken, PartToken, PhraseMatch: parse-time records.
- CatalogError: raised for inconsistent catalog config.
"""

from .types import CatalogError, ColorToken, ParseResult, PartToken, PhraseMatch

__all__ = ["CatalogError", "ColorToken", "ParseResult", "PartToken", "PhraseMatch"]

"""Load a portfolio document from JSON or YAML into typed dataclasses."""

from __future__ import annotations

from pathlib import Path

import msgspec
import msgspec.json as msgspec_json
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .builders import build_document
from .models import DocumentError, PortfolioDocument

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_document(path: Path) -> PortfolioDocument:
    """Load the portfolio document stored at ``path``.

    Parameters
    ----------
    path : Path
        Filesystem path to the document. Files ending in ``.yaml`` or ``.yml``
        are read as YAML; everything else is decoded as JSON.

    Returns
    -------
    PortfolioDocument
        Parsed document ready for rendering.

    Raises
    ------
    FileNotFoundError
        If no file exists at ``path``.
    DocumentError
        If the content cannot be parsed or its top level is not a mapping.

    Examples
    --------
    >>> from pathlib import Path
    >>> from folio_pages.document import load_document
    >>> document = load_document(Path("portfolio.json"))  # doctest: +SKIP
    >>> document.name  # doctest: +SKIP
    'Ada Lovelace'
    """
    if not path.exists():
        msg = f"Document file '{path}' not found."
        raise FileNotFoundError(msg)

    raw = path.read_bytes()
    if path.suffix.lower() in YAML_SUFFIXES:
        loaded = _decode_yaml(raw, path)
    else:
        loaded = _decode_json(raw, path)
    if not isinstance(loaded, dict):
        msg = f"Document '{path}' must contain a mapping at the top level."
        raise DocumentError(msg)
    return build_document(loaded)


def _decode_json(raw: bytes, path: Path) -> object:
    try:
        return msgspec_json.decode(raw)
    except msgspec.DecodeError as exc:
        msg = f"Document '{path}' is not valid JSON: {exc}"
        raise DocumentError(msg) from exc


def _decode_yaml(raw: bytes, path: Path) -> object:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        return loader.load(raw.decode("utf-8"))
    except (YAMLError, UnicodeDecodeError) as exc:
        msg = f"Document '{path}' is not valid YAML: {exc}"
        raise DocumentError(msg) from exc


__all__ = ["load_document"]

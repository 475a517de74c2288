"""
Message catalogs for the validator.

A catalog is a JSON file named after its language inside a language directory:

    lang/en.json
    {
        "rules":  {"required": "The :attribute field is required."},
        "custom": {"users.*.email": "Every user needs a valid e-mail address."}
    }

Usage:
    from fast_validator.core.localization import load_catalog, install_catalog

    load_catalog('en')                           # Bundled catalog
    load_catalog('sk', '/srv/app/lang')          # Application catalog
    install_catalog(validator, 'sk', '/srv/app/lang')
"""

import copy
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from fast_validator import config
from fast_validator.exceptions.common_exceptions import LanguageNotFoundException, MessageCatalogException

if TYPE_CHECKING:
    from fast_validator.validator import Validator

# Parsed catalogs keyed by resolved file path
_catalogs: Dict[str, Dict[str, Any]] = {}


def _catalog_path(lang: str, lang_dir: Optional[str]) -> Path:
    return Path(lang_dir or config.get_lang_dir()) / f"{lang}.json"


def load_catalog(lang: str, lang_dir: Optional[str] = None) -> Dict[str, Any]:
    """Load the catalog for a language. Missing catalogs are fatal.

    Parsed catalogs are cached; callers get their own copy.
    """
    path = _catalog_path(lang, lang_dir)
    key = str(path.resolve())
    if key in _catalogs:
        return copy.deepcopy(_catalogs[key])

    if not path.is_file():
        raise LanguageNotFoundException(lang, str(path))

    try:
        with path.open(encoding='utf-8') as f:
            catalog = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise MessageCatalogException(str(path), str(e)) from e

    if not isinstance(catalog, dict):
        raise MessageCatalogException(str(path), "top level must be an object")
    for section in ("rules", "custom"):
        if not isinstance(catalog.get(section, {}), dict):
            raise MessageCatalogException(str(path), f"`{section}` must be an object")

    logging.debug(f"[CATALOG] Loaded `{lang}` from {path}")
    _catalogs[key] = catalog
    return copy.deepcopy(catalog)


def install_catalog(validator: "Validator", lang: str, lang_dir: Optional[str] = None) -> None:
    catalog = load_catalog(lang, lang_dir)
    validator.set_messages(rules=catalog.get("rules"), custom=catalog.get("custom"))


def available_languages(lang_dir: Optional[str] = None) -> List[str]:
    directory = Path(lang_dir or config.get_lang_dir())
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob("*.json"))


def clear_cache() -> None:
    """Forget parsed catalogs so the next load reads from disk."""
    _catalogs.clear()

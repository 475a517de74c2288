import os
from pathlib import Path

from fast_validator.exceptions.common_exceptions import EnvInvalidException

# Catalogs bundled with the package
DEFAULT_LANG_DIR = str(Path(__file__).parent / "lang")

# Language used when a Validator is created without one
DEFAULT_LANG = "en"


def get_lang() -> str:
    lang = os.getenv("VALIDATOR_LANG", DEFAULT_LANG).strip()
    if not lang or os.sep in lang or "/" in lang:
        raise EnvInvalidException("VALIDATOR_LANG", lang)
    return lang


def get_lang_dir() -> str:
    return os.getenv("VALIDATOR_LANG_DIR") or DEFAULT_LANG_DIR

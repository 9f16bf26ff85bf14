# barsignal/flags.py
"""
Checks for the optional flags.json companion document.

- absent: fine, nothing to check
- not JSON: error carrying the parser message
- object: forceTextOnly (boolean) and catalogVersion (string) type-checked
  against schemas/flags.schema.json; unknown keys ignored
- any other JSON value: warning, nothing to check
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Union

from jsonschema import Draft202012Validator

from .config import FLAGS_FILENAME
from .models import ValidationResult

log = logging.getLogger("barsignal.flags")

SCHEMA_PATH = Path(__file__).parent / "schemas" / "flags.schema.json"


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        schema: Dict[str, Any] = json.load(f)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def check_flags(flags_text: Optional[Union[str, bytes]], result: ValidationResult) -> None:
    """Append flags.json findings to ``result``. ``None`` means the file is absent."""
    if flags_text is None:
        log.debug("%s not present, skipping", FLAGS_FILENAME)
        return

    try:
        flags = json.loads(flags_text)
    except (ValueError, RecursionError) as e:
        result.error(f"Failed to parse {FLAGS_FILENAME}: {e}")
        return

    if not isinstance(flags, dict):
        result.warn(f"{FLAGS_FILENAME} is not an object; recognized flags were not checked")
        return

    errors = sorted(_validator().iter_errors(flags), key=lambda err: list(err.path))
    for err in errors:
        loc = "/".join(map(str, err.path)) or "(root)"
        result.error(f"{FLAGS_FILENAME}: {loc}: {err.message}")

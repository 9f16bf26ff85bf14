# barsignal/rules.py
"""
Per-entry rule set for drinks.json.

Every rule appends to the shared ValidationResult; none of them stop the
others. The only early exit is a row that is not an object at all.

Labels:
- "Drink at index 3"            (before the id is known)
- "Drink at index 3 (mojito)"   (afterwards; "unknown id" when invalid)
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Dict, Optional, Set, Tuple

from .config import ASSET_ROOT_PREFIX, THUMB_ROOT_PREFIX
from .models import ValidationResult, parse_modifiers_supported
from .variants import expected_variant_path, variant_width

SNAKE_ID = re.compile(r"[a-z0-9_]+")

# (label, accepted keys) for the conventional variant pair
VARIANT_PAIR = (
    ("small", ("sm", "512")),
    ("medium", ("md", "1024")),
)

ORIGIN_STRING_FIELDS = ("country", "region", "creator", "notes")


# ============================================================
# Type Predicates
# ============================================================

def _is_number(v: Any) -> bool:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    # ints are exact; isfinite would overflow on huge literals
    return isinstance(v, int) or math.isfinite(v)


def _is_non_negative(v: Any) -> bool:
    return _is_number(v) and v >= 0


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and bool(v.strip())


def _is_nullable_str(v: Any) -> bool:
    return v is None or isinstance(v, str)


def _is_string_array(v: Any) -> bool:
    return isinstance(v, list) and all(isinstance(x, str) for x in v)


def _is_integer(v: Any) -> bool:
    if isinstance(v, bool):
        return False
    if isinstance(v, int):
        return True
    return isinstance(v, float) and v.is_integer()


# Optional scalar/array fields: field -> (predicate, expected shape)
OPTIONAL_FIELD_RULES: Dict[str, Tuple[Callable[[Any], bool], str]] = {
    "aliases": (_is_string_array, "an array of strings"),
    "steps": (_is_string_array, "an array of strings"),
    "tags": (_is_string_array, "an array of strings"),
    "sources": (_is_string_array, "an array of strings"),
    "relatedDrinkIds": (_is_string_array, "an array of strings"),
    "dominantColors": (_is_string_array, "an array of strings"),
    "totalVolumeMl": (_is_non_negative, "a finite non-negative number"),
    "estimatedAbvPercent": (_is_non_negative, "a finite non-negative number"),
    "calories": (_is_non_negative, "a finite non-negative number"),
    "prepTimeSec": (_is_non_negative, "a finite non-negative number"),
    "technique": (_is_nullable_str, "a string or null"),
    "glass": (_is_nullable_str, "a string or null"),
    "ice": (_is_nullable_str, "a string or null"),
    "rim": (_is_nullable_str, "a string or null"),
    "strength": (_is_nullable_str, "a string or null"),
    "difficulty": (_is_nullable_str, "a string or null"),
    "themeColor": (_is_nullable_str, "a string or null"),
    "accentColor": (_is_nullable_str, "a string or null"),
    "isIBAOfficial": (lambda v: isinstance(v, bool), "a boolean"),
    "isMocktail": (lambda v: isinstance(v, bool), "a boolean"),
}


def display_id(entry: Dict[str, Any]) -> str:
    ident = entry.get("id")
    return ident if _is_non_empty_str(ident) else "unknown id"


# ============================================================
# Entry
# ============================================================

def check_entry(entry: Any, index: int, seen_ids: Set[str], result: ValidationResult) -> None:
    """
    Apply every per-entry rule to ``entry``.

    ``seen_ids`` accumulates ids across calls in file order, so the first
    occurrence of an id is kept and every later one is reported.
    """
    prefix = f"Drink at index {index}"

    if not isinstance(entry, dict):
        result.error(f"{prefix}: must be an object")
        return

    _check_id(entry.get("id"), prefix, seen_ids, result)
    label = f"{prefix} ({display_id(entry)})"

    if not _is_non_empty_str(entry.get("name")):
        result.error(f"{label}: name must be a non-empty string")

    if not isinstance(entry.get("category"), str):
        result.error(f"{label}: category must be a string")

    popularity = entry.get("popularity")
    if not _is_number(popularity) or not 0 <= popularity <= 100:
        result.error(f"{label}: popularity must be a number between 0 and 100")

    _check_optional(entry, "aliases", label, result)

    image_path = _check_image_path(entry.get("imagePath"), label, result)
    _check_image_variants(entry.get("imageVariants"), image_path, label, result)

    if "modifiersSupported" in entry:
        if parse_modifiers_supported(entry["modifiersSupported"]) is None:
            result.error(f"{label}: modifiersSupported must be a boolean or an array of strings")

    if "ingredients" in entry:
        _check_ingredients(entry["ingredients"], label, result)
    if "garnish" in entry:
        _check_garnish(entry["garnish"], label, result)
    if "origin" in entry:
        _check_origin(entry["origin"], label, result)

    for field in OPTIONAL_FIELD_RULES:
        if field != "aliases":
            _check_optional(entry, field, label, result)


def _check_id(ident: Any, prefix: str, seen_ids: Set[str], result: ValidationResult) -> None:
    if not _is_non_empty_str(ident):
        result.error(f"{prefix}: id must be a non-empty string")
        return

    if ident in seen_ids:
        result.error(f'{prefix}: duplicate id "{ident}"')
    else:
        seen_ids.add(ident)

    if not SNAKE_ID.fullmatch(ident):
        result.error(
            f'{prefix}: id "{ident}" must be in snake_case format '
            "(lowercase letters, numbers, and underscores only)"
        )


def _check_optional(entry: Dict[str, Any], field: str, label: str, result: ValidationResult) -> None:
    if field not in entry:
        return
    predicate, shape = OPTIONAL_FIELD_RULES[field]
    if not predicate(entry[field]):
        result.error(f"{label}: {field} must be {shape}")


# ============================================================
# Images
# ============================================================

def _check_image_path(image_path: Any, label: str, result: ValidationResult) -> Optional[str]:
    """Returns the path when it is usable for variant derivation."""
    if not isinstance(image_path, str) or not image_path:
        result.error(f"{label}: imagePath must be a string")
        return None

    if not image_path.startswith(ASSET_ROOT_PREFIX):
        result.error(f'{label}: imagePath "{image_path}" must start with "{ASSET_ROOT_PREFIX}"')
    if not image_path.lower().endswith(".png"):
        result.warn(f'{label}: imagePath "{image_path}" should end with .png')
    return image_path


def _check_image_variants(
    variants: Any,
    image_path: Optional[str],
    label: str,
    result: ValidationResult,
) -> None:
    if not isinstance(variants, dict):
        result.error(f"{label}: imageVariants must be an object")
        return

    if not variants:
        result.error(f"{label}: imageVariants must contain at least one variant")
        return

    for key, path in variants.items():
        if not _is_non_empty_str(path):
            result.error(f"{label}: imageVariants.{key} must be a non-empty string")
            continue
        if not path.startswith(THUMB_ROOT_PREFIX):
            result.error(f'{label}: imageVariants.{key} "{path}" must start with "{THUMB_ROOT_PREFIX}"')

        width = variant_width(key)
        if width is None or image_path is None:
            continue
        expected = expected_variant_path(image_path, width)
        if path != expected:
            result.warn(f'{label}: imageVariants.{key} is "{path}", expected "{expected}"')

    for size, keys in VARIANT_PAIR:
        if not any(k in variants for k in keys):
            result.warn(f"{label}: imageVariants has no {size} variant ({' or '.join(keys)})")


# ============================================================
# Nested Optionals
# ============================================================

def _check_ingredients(value: Any, label: str, result: ValidationResult) -> None:
    if not isinstance(value, list):
        result.error(f"{label}: ingredients must be an array")
        return

    for i, item in enumerate(value):
        where = f"ingredients[{i}]"
        if not isinstance(item, dict):
            result.error(f"{label}: {where} must be an object")
            continue
        if not _is_non_empty_str(item.get("name")):
            result.error(f"{label}: {where}.name must be a non-empty string")
        # null amount means "to taste" / "top up"
        amount = item.get("amount")
        if amount is not None and not _is_non_negative(amount):
            result.error(f"{label}: {where}.amount must be a finite non-negative number")
        if "unit" in item and not _is_nullable_str(item["unit"]):
            result.error(f"{label}: {where}.unit must be a string or null")
        if "optional" in item and not isinstance(item["optional"], bool):
            result.error(f"{label}: {where}.optional must be a boolean")


def _check_garnish(value: Any, label: str, result: ValidationResult) -> None:
    if not isinstance(value, list):
        result.error(f"{label}: garnish must be an array")
        return

    for i, item in enumerate(value):
        if isinstance(item, str):
            if not item.strip():
                result.error(f"{label}: garnish[{i}] must be a non-empty string")
        elif isinstance(item, dict):
            if not _is_non_empty_str(item.get("name")):
                result.error(f"{label}: garnish[{i}].name must be a non-empty string")
        else:
            result.error(f"{label}: garnish[{i}] must be a string or an object")


def _check_origin(value: Any, label: str, result: ValidationResult) -> None:
    if not isinstance(value, dict):
        result.error(f"{label}: origin must be an object")
        return

    for key in ORIGIN_STRING_FIELDS:
        if key in value and not _is_nullable_str(value[key]):
            result.error(f"{label}: origin.{key} must be a string or null")

    year = value.get("year")
    if year is not None and not _is_integer(year):
        result.error(f"{label}: origin.year must be an integer or null")

# barsignal/catalog.py
"""
Catalog validation entry points.

Sequencing:
1. drinks.json absent / not JSON / not an array → single error, stop
2. per-entry rules for every row (accumulating)
3. relatedDrinkIds cross-reference (warnings)
4. on-disk existence of every image and variant (VALIDATE_IMAGE_FILES=true)
5. flags.json checks

Usage:
```python
from barsignal.catalog import validate_catalog, validate_catalog_file

result = validate_catalog('[{"id": "mojito", ...}]')
result = validate_catalog_file(Path("."))
if not result.success:
    ...
```
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Set, Union

from .config import (
    ASSET_ROOT_PREFIX,
    CATALOG_FILENAME,
    FLAGS_FILENAME,
    THUMB_ROOT_PREFIX,
    image_files_check_enabled,
)
from .flags import check_flags
from .models import ValidationResult
from .rules import check_entry, display_id

log = logging.getLogger("barsignal.catalog")


# ============================================================
# Pure Validation
# ============================================================

def validate_catalog(
    catalog_text: Optional[Union[str, bytes]],
    flags_text: Optional[Union[str, bytes]] = None,
    *,
    check_image_files: bool = False,
    asset_root: Optional[Path] = None,
) -> ValidationResult:
    """
    Validate catalog (and flags) document text.

    Args:
        catalog_text: Raw drinks.json content, or None when the file is absent.
        flags_text: Raw flags.json content, or None when the file is absent.
        check_image_files: Verify referenced images exist under ``asset_root``.
        asset_root: Directory image paths resolve against (default: cwd).

    Returns:
        ValidationResult with ordered errors and warnings. Never raises for
        bad catalog data.
    """
    result = ValidationResult()

    if catalog_text is None:
        result.error(f"{CATALOG_FILENAME} file not found")
        return result

    try:
        drinks = json.loads(catalog_text)
    except (ValueError, RecursionError) as e:
        result.error(f"Failed to parse {CATALOG_FILENAME}: {e}")
        return result

    if not isinstance(drinks, list):
        result.error(f"{CATALOG_FILENAME} must contain an array of drink entries")
        return result

    result.entry_count = len(drinks)
    log.debug("Loaded %d catalog entries", len(drinks))

    seen_ids: Set[str] = set()
    for index, drink in enumerate(drinks):
        check_entry(drink, index, seen_ids, result)

    check_related_ids(drinks, seen_ids, result)

    if check_image_files:
        check_image_files_exist(drinks, asset_root or Path.cwd(), result)
    else:
        log.debug("Image file checks disabled")

    check_flags(flags_text, result)

    log.info(
        "Catalog validation finished: %d entries, %d errors, %d warnings",
        len(drinks), len(result.errors), len(result.warnings),
    )
    return result


# ============================================================
# Cross Checks
# ============================================================

def check_related_ids(drinks: List[Any], known_ids: Set[str], result: ValidationResult) -> None:
    """Warn when relatedDrinkIds names a drink that is not in the catalog."""
    for index, drink in enumerate(drinks):
        if not isinstance(drink, dict):
            continue
        related = drink.get("relatedDrinkIds")
        if not isinstance(related, list):
            continue
        for rid in related:
            if isinstance(rid, str) and rid not in known_ids:
                result.warn(
                    f'Drink at index {index} ({display_id(drink)}): '
                    f'relatedDrinkIds references unknown drink "{rid}"'
                )


def _inside_root(root: Path, rel: str, prefix: str) -> bool:
    """
    True when ``rel`` may be looked up on disk.

    Paths failing the prefix rule are already reported per entry and are
    never resolved; ``..`` segments must not climb out of ``root``.
    """
    if not rel.startswith(prefix):
        return False
    base = root.resolve()
    candidate = (base / rel).resolve()
    return base in candidate.parents


def check_image_files_exist(drinks: List[Any], root: Path, result: ValidationResult) -> None:
    """Every imagePath and imageVariants path must exist relative to ``root``."""
    for drink in drinks:
        if not isinstance(drink, dict):
            continue
        ident = drink.get("id")
        image_path = drink.get("imagePath")
        if not ident or not isinstance(image_path, str) or not image_path:
            continue

        if not _inside_root(root, image_path, ASSET_ROOT_PREFIX):
            if image_path.startswith(ASSET_ROOT_PREFIX):
                result.error(f'Image path escapes the catalog root: {image_path} for drink "{ident}"')
        elif not (root / image_path).exists():
            result.error(f'Image file not found: {image_path} for drink "{ident}"')

        variants = drink.get("imageVariants")
        if not isinstance(variants, dict):
            continue
        for variant, path in variants.items():
            if not isinstance(path, str) or not path:
                continue
            if not _inside_root(root, path, THUMB_ROOT_PREFIX):
                if path.startswith(THUMB_ROOT_PREFIX):
                    result.error(
                        f'Image variant path escapes the catalog root: {path} ({variant}) for drink "{ident}"'
                    )
            elif not (root / path).exists():
                result.error(f'Image variant file not found: {path} ({variant}) for drink "{ident}"')


# ============================================================
# File Loader
# ============================================================

def _read_document(path: Path) -> Optional[bytes]:
    if not path.exists():
        return None
    return path.read_bytes()


def validate_catalog_file(root: Path, check_image_files: Optional[bool] = None) -> ValidationResult:
    """
    Validate ``<root>/drinks.json`` and ``<root>/flags.json``.

    ``check_image_files`` defaults to the VALIDATE_IMAGE_FILES toggle.
    """
    if check_image_files is None:
        check_image_files = image_files_check_enabled()

    log.info("Validating %s (image file checks: %s)", root / CATALOG_FILENAME, check_image_files)
    return validate_catalog(
        _read_document(root / CATALOG_FILENAME),
        _read_document(root / FLAGS_FILENAME),
        check_image_files=check_image_files,
        asset_root=root,
    )


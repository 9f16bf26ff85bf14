# barsignal/variants.py
"""Thumbnail naming shared by the validator and the generator."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Optional

from .config import THUMB_ROOT_PREFIX, VARIANT_KEY_WIDTHS


def thumb_filename(stem: str, width: int) -> str:
    """margarita, 512 → margarita_512.png"""
    return f"{stem}_{width}.png"


def expected_variant_path(image_path: str, width: int) -> str:
    """
    Catalog path the generator writes for ``image_path`` at ``width``.

    Examples:
        expected_variant_path("drinks/margarita.png", 512)
            → "drinks/_thumbs/margarita_512.png"
        expected_variant_path("drinks/old.fashioned.jpg", 1024)
            → "drinks/_thumbs/old.fashioned_1024.png"
    """
    stem = PurePosixPath(image_path).stem
    return THUMB_ROOT_PREFIX + thumb_filename(stem, width)


def variant_width(key: str) -> Optional[int]:
    """Width for a recognized variant key (sm/md or legacy 512/1024)."""
    return VARIANT_KEY_WIDTHS.get(key)

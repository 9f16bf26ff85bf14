# barsignal/config.py
"""
Path conventions and environment toggles shared by the validator and the
thumbnail generator.

Both tools agree on one contract: drink images live under ``drinks/`` and
their resized variants under ``drinks/_thumbs/`` named ``<stem>_<width>.png``.

Environment Variables:
- VALIDATE_IMAGE_FILES: exactly "true" enables on-disk existence checks
- BARSIGNAL_ROOT: catalog root used when no --root is given
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Tuple

# ============================================================
# Filenames & Path Prefixes
# ============================================================

CATALOG_FILENAME = "drinks.json"
FLAGS_FILENAME = "flags.json"

ASSET_ROOT_PREFIX = "drinks/"
THUMB_ROOT_PREFIX = "drinks/_thumbs/"

SOURCE_DIRNAME = "drinks"
THUMB_DIRNAME = "_thumbs"

# ============================================================
# Thumbnails
# ============================================================

# Produced in this order for every source image
THUMB_WIDTHS: Tuple[int, ...] = (512, 1024)

SOURCE_EXTS = frozenset({".png", ".jpg", ".jpeg", ".webp"})

# Variant key -> width. "sm"/"md" are current, numeric keys are legacy.
VARIANT_KEY_WIDTHS: Dict[str, int] = {
    "sm": 512,
    "md": 1024,
    "512": 512,
    "1024": 1024,
}

# ============================================================
# Environment
# ============================================================

def image_files_check_enabled() -> bool:
    """Filesystem cross-check toggle. Only the literal "true" turns it on."""
    return os.getenv("VALIDATE_IMAGE_FILES") == "true"


def default_root(fallback: Optional[Path] = None) -> Path:
    """
    Resolve the catalog root.

    BARSIGNAL_ROOT wins, then ``fallback``, then the working directory.
    """
    env_root = os.getenv("BARSIGNAL_ROOT", "").strip()
    if env_root:
        return Path(env_root)
    if fallback is not None:
        return fallback
    return Path.cwd()

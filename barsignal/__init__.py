# barsignal/__init__.py
"""
BarSignal catalog tooling.

This package provides:
- Catalog validation for drinks.json (+ optional flags.json)
- Thumbnail generation for the drink-image CDN feed

Environment Variables (see config):
- VALIDATE_IMAGE_FILES: "true" enables on-disk image existence checks
- BARSIGNAL_ROOT: default catalog root for the CLIs

Submodules:
- config: path conventions, filenames, env toggles
- models: ValidationResult, modifiersSupported variant, ThumbnailRun
- rules: per-entry rule set
- flags: flags.json checks
- catalog: top-level validation and file loader
- report: console report
- thumbs: Pillow thumbnail generator
"""

from __future__ import annotations

__all__ = [
    # Validation
    "validate_catalog",
    "validate_catalog_file",
    "ValidationResult",
    "print_report",
    # Thumbnails
    "generate_thumbnails",
    "ThumbnailRun",
]


# Lazy imports keep Pillow out of validator-only runs
def __getattr__(name: str):
    """Lazy import pattern for clean module loading."""

    if name in ("validate_catalog", "validate_catalog_file"):
        from . import catalog
        return getattr(catalog, name)

    if name in ("ValidationResult", "ThumbnailRun"):
        from . import models
        return getattr(models, name)

    if name == "print_report":
        from .report import print_report
        return print_report

    if name == "generate_thumbnails":
        from .thumbs import generate_thumbnails
        return generate_thumbnails

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

# barsignal/thumbs.py
"""
Thumbnail generation for drink images.

For every png/jpg/jpeg/webp file directly inside the source directory,
writes ``<stem>_512.png`` then ``<stem>_1024.png`` into the thumbnail
directory. Width is capped at the target, height follows the aspect ratio,
and images narrower than the target keep their native size.

Existing outputs are overwritten; only files that did not exist before the
run count as created.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from PIL import Image

from .config import SOURCE_EXTS, THUMB_DIRNAME, THUMB_WIDTHS
from .models import ThumbnailRun
from .variants import thumb_filename

log = logging.getLogger("barsignal.thumbs")


def list_source_images(src_dir: Path) -> List[Path]:
    """Source images in ``src_dir``, sorted by filename."""
    return sorted(
        p for p in src_dir.iterdir()
        if p.is_file() and p.suffix.lower() in SOURCE_EXTS
    )


def resize_to_width(img: Image.Image, width: int) -> Image.Image:
    """Scale to ``width`` keeping aspect ratio. Never upscales."""
    w, h = img.size
    if w <= width:
        return img.copy()
    new_h = max(1, int(round(h * width / w)))
    return img.resize((width, new_h), Image.LANCZOS)


def _png_ready(img: Image.Image) -> Image.Image:
    # PNG cannot hold CMYK/YCbCr; keep alpha when the source has any
    if img.mode in ("RGB", "RGBA", "L", "LA"):
        return img
    if img.mode == "P" or "A" in img.getbands():
        return img.convert("RGBA")
    return img.convert("RGB")


def write_thumbnails(source: Path, out_dir: Path, run: ThumbnailRun) -> None:
    with Image.open(source) as opened:
        img = _png_ready(opened)
        for width in THUMB_WIDTHS:
            target = out_dir / thumb_filename(source.stem, width)
            existed = target.exists()
            resize_to_width(img, width).save(target, format="PNG")
            if not existed:
                run.created += 1
            run.written.append(target)
            log.info("Wrote %s", target)


def generate_thumbnails(src_dir: Path, out_dir: Optional[Path] = None) -> ThumbnailRun:
    """
    Generate every thumbnail variant for images in ``src_dir``.

    Args:
        src_dir: Directory holding the source drink images.
        out_dir: Destination (default: ``<src_dir>/_thumbs``); created if missing.

    Returns:
        ThumbnailRun with the written paths and the count of new files.

    Raises:
        OSError / PIL.UnidentifiedImageError on unreadable sources or
        unwritable outputs. Nothing is retried.
    """
    out_dir = out_dir if out_dir is not None else src_dir / THUMB_DIRNAME
    out_dir.mkdir(parents=True, exist_ok=True)

    run = ThumbnailRun()
    sources = list_source_images(src_dir)
    run.sources = len(sources)
    if not sources:
        log.info("No source images found in %s. Skipping.", src_dir)
        return run

    for source in sources:
        write_thumbnails(source, out_dir, run)

    log.info("Done. Generated or updated thumbnails. New files: %d.", run.created)
    return run

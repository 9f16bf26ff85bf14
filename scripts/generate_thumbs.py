#!/usr/bin/env python3
# scripts/generate_thumbs.py
"""
Generate 512px and 1024px PNG thumbnails for every image in drinks/.

Behavior:
- Sources: *.png, *.jpg, *.jpeg, *.webp directly inside --src (case-insensitive)
- Outputs: <out>/<name>_512.png and <out>/<name>_1024.png, in that order
- Aspect ratio preserved, never upscaled
- Existing thumbnails are overwritten; the summary counts only new files

Usage:
    # Default layout (drinks/ -> drinks/_thumbs/)
    python scripts/generate_thumbs.py

    # Custom directories
    python scripts/generate_thumbs.py --src assets/drinks --out assets/drinks/_thumbs

    # Verbose output
    python scripts/generate_thumbs.py --verbose

Exit codes:
- 0 = done (including "no source images found")
- 1 = any read/resize/write failure
"""

from __future__ import annotations

import os
import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from barsignal.config import SOURCE_DIRNAME, THUMB_DIRNAME  # noqa: E402
from barsignal.thumbs import generate_thumbnails  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
log = logging.getLogger("generate_thumbs")


def main() -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate 512/1024 PNG thumbnails for drink images"
    )
    parser.add_argument(
        "--src",
        default=SOURCE_DIRNAME,
        help=f"Source image directory (default: {SOURCE_DIRNAME})",
    )
    parser.add_argument(
        "--out",
        default=None,
        help=f"Output directory (default: <src>/{THUMB_DIRNAME})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    src_dir = Path(args.src)
    out_dir = Path(args.out) if args.out else None

    try:
        run = generate_thumbnails(src_dir, out_dir)
    except Exception as e:
        log.error(f"Thumbnail generation failed: {e}")
        log.debug("Traceback", exc_info=True)
        return 1

    log.info(f"Sources: {run.sources}, written: {len(run.written)}, new: {run.created}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

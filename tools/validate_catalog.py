#!/usr/bin/env python3
"""
Validate drinks.json (and flags.json, if present) in the catalog root.

Usage:
  python tools/validate_catalog.py
  python tools/validate_catalog.py --root path/to/catalog
  VALIDATE_IMAGE_FILES=true python tools/validate_catalog.py
  python tools/validate_catalog.py --json

Exit codes:
- 0 = OK (warnings allowed)
- 1 = validation errors
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]  # repo root
sys.path.insert(0, str(ROOT))

from barsignal.catalog import validate_catalog_file  # noqa: E402
from barsignal.config import default_root  # noqa: E402
from barsignal.report import print_report  # noqa: E402


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Validate the BarSignal drink catalog")
    ap.add_argument("--root", default=None, help="Catalog root holding drinks.json (default: repo root)")
    ap.add_argument("--json", action="store_true", help="Print the result as JSON instead of a report")
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = Path(args.root) if args.root else default_root(ROOT)
    result = validate_catalog_file(root)

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print_report(result)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())

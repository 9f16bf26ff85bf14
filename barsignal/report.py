# barsignal/report.py
"""Human-readable console report for a ValidationResult."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .models import ValidationResult


def _numbered(title: str, lines: List[str], out: TextIO) -> None:
    print(f"{title}:", file=out)
    for i, line in enumerate(lines, start=1):
        print(f"  {i}. {line}", file=out)


def print_report(result: ValidationResult, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print("[validate_catalog] Validating BarSignal catalog...\n", file=out)

    if result.success:
        print("[ok] Catalog validation passed", file=out)
    else:
        print("[error] Catalog validation failed\n", file=out)
        _numbered("Errors found", result.errors, out)

    if result.warnings:
        print("", file=out)
        _numbered("Warnings", result.warnings, out)

    print("", file=out)
    if result.entry_count is not None:
        print(f"Validated {result.entry_count} drink entries", file=out)
    print(f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)", file=out)

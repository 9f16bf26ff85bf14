# tests/conftest.py
"""
Pytest configuration and shared fixtures.

- Sample drink entries (fully valid; tests mutate copies)
- Catalog root writer for file-based validation
- Image helpers for thumbnail tests
"""

import copy
import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image

# Make "import barsignal" work when tests run from CI/workdir
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


# ============================================================
# Sample Data
# ============================================================

MARGARITA = {
    "id": "margarita",
    "name": "Margarita",
    "category": "classic",
    "popularity": 95,
    "imagePath": "drinks/margarita.png",
    "imageVariants": {
        "sm": "drinks/_thumbs/margarita_512.png",
        "md": "drinks/_thumbs/margarita_1024.png",
    },
}


@pytest.fixture
def margarita():
    """A fully valid entry with no optional fields."""
    return copy.deepcopy(MARGARITA)


@pytest.fixture
def make_entry():
    """Build a valid entry for ``drink_id`` with overrides applied."""
    def _make(drink_id: str = "margarita", **overrides):
        entry = {
            "id": drink_id,
            "name": drink_id.replace("_", " ").title(),
            "category": "classic",
            "popularity": 50,
            "imagePath": f"drinks/{drink_id}.png",
            "imageVariants": {
                "sm": f"drinks/_thumbs/{drink_id}_512.png",
                "md": f"drinks/_thumbs/{drink_id}_1024.png",
            },
        }
        entry.update(overrides)
        return entry
    return _make


@pytest.fixture
def catalog_text():
    """Serialize a list of entries the way drinks.json stores them."""
    def _dump(*entries) -> str:
        return json.dumps(list(entries))
    return _dump


# ============================================================
# Catalog Root
# ============================================================

@pytest.fixture
def catalog_root(tmp_path):
    """Write drinks.json / flags.json under a temp root and return the root."""
    def _write(entries=None, flags=None, raw_catalog=None, raw_flags=None) -> Path:
        if raw_catalog is not None:
            (tmp_path / "drinks.json").write_text(raw_catalog, encoding="utf-8")
        elif entries is not None:
            (tmp_path / "drinks.json").write_text(json.dumps(entries), encoding="utf-8")
        if raw_flags is not None:
            (tmp_path / "flags.json").write_text(raw_flags, encoding="utf-8")
        elif flags is not None:
            (tmp_path / "flags.json").write_text(json.dumps(flags), encoding="utf-8")
        return tmp_path
    return _write


@pytest.fixture
def no_image_env():
    """Run with VALIDATE_IMAGE_FILES unset."""
    env = {k: v for k, v in os.environ.items() if k != "VALIDATE_IMAGE_FILES"}
    with patch.dict(os.environ, env, clear=True):
        yield


# ============================================================
# Images
# ============================================================

@pytest.fixture
def make_image():
    """Write a solid-color image of ``size`` to ``path``."""
    def _make(path: Path, size=(2048, 1024), mode="RGB", fmt=None) -> Path:
        color = (200, 80, 40, 255)[: len(mode)] if mode in ("RGB", "RGBA") else 128
        Image.new(mode, size, color).save(path, format=fmt)
        return path
    return _make


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "cli: runs a command-line tool in a subprocess")

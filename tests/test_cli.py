# tests/test_cli.py
"""Smoke tests for the command-line tools (run as subprocesses)."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]  # repo root

pytestmark = pytest.mark.cli


def _env(**extra):
    env = {k: v for k, v in os.environ.items() if k not in ("VALIDATE_IMAGE_FILES", "BARSIGNAL_ROOT")}
    env.update(extra)
    return env


def _validate(*args, **env):
    return subprocess.run(
        [sys.executable, str(ROOT / "tools" / "validate_catalog.py"), *args],
        capture_output=True, text=True, env=_env(**env),
    )


def test_validator_passes_on_valid_catalog(catalog_root, margarita):
    root = catalog_root(entries=[margarita])
    proc = _validate("--root", str(root))
    assert proc.returncode == 0
    assert "[ok] Catalog validation passed" in proc.stdout
    assert "Validated 1 drink entries" in proc.stdout


def test_validator_warnings_do_not_fail(catalog_root, margarita):
    margarita["imageVariants"]["sm"] = "drinks/_thumbs/marg_512.png"
    root = catalog_root(entries=[margarita])
    proc = _validate("--root", str(root))
    assert proc.returncode == 0
    assert "Warnings:" in proc.stdout
    assert "drinks/_thumbs/margarita_512.png" in proc.stdout


def test_validator_fails_with_numbered_errors(catalog_root, make_entry):
    root = catalog_root(entries=[make_entry("mojito"), make_entry("mojito", popularity=-1)])
    proc = _validate("--root", str(root))
    assert proc.returncode == 1
    assert '1. Drink at index 1: duplicate id "mojito"' in proc.stdout
    assert "2. Drink at index 1 (mojito): popularity" in proc.stdout
    assert "2 error(s), 0 warning(s)" in proc.stdout


def test_validator_missing_catalog(tmp_path):
    proc = _validate("--root", str(tmp_path))
    assert proc.returncode == 1
    assert "drinks.json file not found" in proc.stdout


def test_validator_root_from_env(catalog_root, margarita):
    root = catalog_root(entries=[margarita])
    proc = _validate(BARSIGNAL_ROOT=str(root))
    assert proc.returncode == 0


def test_validator_json_output(catalog_root, margarita):
    root = catalog_root(entries=[margarita], raw_flags="{")
    proc = _validate("--root", str(root), "--json")
    assert proc.returncode == 1
    data = json.loads(proc.stdout)
    assert data["success"] is False
    assert data["entry_count"] == 1
    assert data["errors"][0].startswith("Failed to parse flags.json")


def test_validator_image_toggle(catalog_root, margarita):
    root = catalog_root(entries=[margarita])
    assert _validate("--root", str(root), VALIDATE_IMAGE_FILES="1").returncode == 0
    proc = _validate("--root", str(root), VALIDATE_IMAGE_FILES="true")
    assert proc.returncode == 1
    assert "Image file not found: drinks/margarita.png" in proc.stdout


def test_validator_on_shipped_catalog():
    assert _validate().returncode == 0


def _thumbs(*args):
    return subprocess.run(
        [sys.executable, str(ROOT / "scripts" / "generate_thumbs.py"), *args],
        capture_output=True, text=True, env=_env(),
    )


def test_thumbs_cli_generates_and_reports(tmp_path):
    src = tmp_path / "drinks"
    src.mkdir()
    Image.new("RGB", (1600, 800), (10, 120, 200)).save(src / "blue_lagoon.png")

    proc = _thumbs("--src", str(src))
    assert proc.returncode == 0, proc.stderr
    assert (src / "_thumbs" / "blue_lagoon_512.png").exists()
    assert (src / "_thumbs" / "blue_lagoon_1024.png").exists()
    assert "new: 2" in proc.stderr

    again = _thumbs("--src", str(src))
    assert again.returncode == 0
    assert "new: 0" in again.stderr


def test_thumbs_cli_no_sources(tmp_path):
    proc = _thumbs("--src", str(tmp_path))
    assert proc.returncode == 0
    assert "No source images found" in proc.stderr


def test_thumbs_cli_bad_image_exits_1(tmp_path):
    src = tmp_path / "drinks"
    src.mkdir()
    (src / "broken.png").write_bytes(b"definitely not a png")
    proc = _thumbs("--src", str(src))
    assert proc.returncode == 1
    assert "Thumbnail generation failed" in proc.stderr

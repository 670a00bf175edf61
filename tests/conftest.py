import sys
from pathlib import Path

import json5
import pytest

from tspatch.app.settings import SETTINGS_ENV_VAR, loadSettings



def pytest_configure(config: pytest.Config) -> None:
    if sys.flags.optimize:
        raise RuntimeError("Assertions are disabled (optimize > 0)")



@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point user settings at an empty location so a developer's ~/.tspatch never leaks in."""
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(tmp_path / "no-settings.json5"))
    loadSettings.cache_clear()
    yield
    loadSettings.cache_clear()



def _writeManifest(package_dir: Path, payload: dict) -> Path:
    package_dir.mkdir(parents=True, exist_ok=True)
    manifest = package_dir / "package.json"
    manifest.write_text(json5.dumps(payload, indent=2, quote_keys=True, trailing_commas=False), encoding="utf-8")
    return manifest



@pytest.fixture()
def write_manifest():
    return _writeManifest



@pytest.fixture()
def ts_install(tmp_path):
    """
    A project with node_modules/typescript installed:
      project/node_modules/typescript/{package.json, lib/}
    """
    project = tmp_path / "project"
    package_dir = project / "node_modules" / "typescript"
    _writeManifest(package_dir, {"name": "typescript", "version": "4.9.5", "main": "./lib/typescript.js"})
    (package_dir / "lib").mkdir()
    return project, package_dir

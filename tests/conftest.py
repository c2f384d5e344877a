from __future__ import annotations

import importlib
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import typed_config...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def registry():
    """
    A private registry so tests never see fields declared by other tests.
    """
    from typed_config import FieldRegistry

    return FieldRegistry()


@pytest.fixture
def store(registry, tmp_path: Path):
    from typed_config import ConfigStore

    return ConfigStore(tmp_path / "cfg", registry=registry)


@pytest.fixture
def sandbox_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point settings at a temp config directory so tests never touch a real config.json.
    """
    config_dir = tmp_path / "config"
    monkeypatch.setenv("CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("CONFIG_FILE", "app.json")
    monkeypatch.delenv("CONFIG_LOAD_ON_STARTUP", raising=False)
    monkeypatch.delenv("CONFIG_SAVE_ON_SHUTDOWN", raising=False)
    return config_dir


@pytest.fixture
def reload_endpoints(monkeypatch: pytest.MonkeyPatch, sandbox_config: Path, registry):
    """
    Endpoints create the store singleton at import time; reload after sandboxing
    settings and swap in a store over the private registry.
    """
    import endpoints.config_endpoints as config_endpoints
    from typed_config import AsyncConfigStore, ConfigStore

    importlib.reload(config_endpoints)
    monkeypatch.setattr(
        config_endpoints, "STORE", AsyncConfigStore(ConfigStore(sandbox_config, registry=registry))
    )
    return config_endpoints

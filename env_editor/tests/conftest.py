import sys
from pathlib import Path

import pytest

# Ensure the env_editor package is importable when running tests from a checkout
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from env_editor import ui  # noqa: E402
from env_editor.config import ENV_POWERSHELL, ENV_PROFILE, ENV_VERBOSE, Settings  # noqa: E402
from env_editor.persistence import PosixBackend  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    """Quiet console and no stray overrides from the developer's shell."""
    for var in (ENV_PROFILE, ENV_POWERSHELL, ENV_VERBOSE):
        monkeypatch.delenv(var, raising=False)
    ui.set_verbose(False)
    yield
    ui.set_verbose(False)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def env(home: Path) -> dict:
    """A fake process environment with HOME pointing at a temp directory."""
    return {"HOME": str(home)}


@pytest.fixture
def posix_backend(env: dict) -> PosixBackend:
    return PosixBackend(Settings(), env)

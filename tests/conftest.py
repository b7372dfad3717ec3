import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from sm64config.paths import ENV_BASE_DIR, ENV_CONFIG_DIR, PathResolver  # noqa: E402


@pytest.fixture()
def dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict:
    """Preferred and fallback directories under tmp_path; neither is created."""
    preferred = tmp_path / "xdg" / "sm64pc"
    base = tmp_path / "base"
    base.mkdir()
    monkeypatch.setenv(ENV_CONFIG_DIR, str(preferred))
    monkeypatch.setenv(ENV_BASE_DIR, str(base))
    return {"preferred": preferred, "base": base}


@pytest.fixture()
def resolver(dirs: dict) -> PathResolver:
    return PathResolver.fixed(dirs["preferred"], dirs["base"])

import pathlib
import sys

import pytest
import structlog

# Add `src/` so `import insight_format` works without an install.
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from insight_format.config import CONFIG_PATH_ENV, ENV_OVERRIDES, reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Each test starts from config.yaml defaults with no env overrides."""
    for name in (*ENV_OVERRIDES, CONFIG_PATH_ENV):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()

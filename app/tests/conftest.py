import sys
from pathlib import Path

import pytest

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `localization.i18n`) and `tests.factories` works during pytest
# collection regardless of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from localization.logging import configure_logging  # noqa: E402


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Suppress log output for the whole test session."""
    configure_logging()

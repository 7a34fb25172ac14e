import sys
from pathlib import Path

# Ensure the application package root (app/) is on sys.path so
# `infrastructure` and `modules` import during collection regardless of the
# directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
import structlog  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Keep structlog context variables from leaking between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()

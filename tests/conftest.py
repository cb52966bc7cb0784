import logging
import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from villas import Lattice  # noqa: E402
from villas import logging_utils  # noqa: E402


def pytest_configure(config):  # register custom markers
    config.addinivalue_line("markers", "structure: lattice/room structural invariants")
    config.addinivalue_line("markers", "performance: coarse timing guardrails")


@pytest.fixture
def walls5x5():
    return Lattice(5, 5)


@pytest.fixture(autouse=True)
def _isolate_villas_env(monkeypatch):
    """Start every test without VILLAS_* variables and undo logging changes afterwards.

    Variables written by python-dotenv during a test bypass monkeypatch, so they
    are popped explicitly on teardown.
    """
    for key in list(os.environ):
        if key.startswith("VILLAS_"):
            monkeypatch.delenv(key, raising=False)
    yield
    for key in list(os.environ):
        if key.startswith("VILLAS_"):
            os.environ.pop(key, None)
    logging_utils.configure(level="info", json_mode=False)
    pkg_logger = logging.getLogger("villas")
    for handler in list(pkg_logger.handlers):
        if getattr(handler, "_villas_managed", False):
            pkg_logger.removeHandler(handler)
            handler.close()
    pkg_logger.setLevel(logging.NOTSET)

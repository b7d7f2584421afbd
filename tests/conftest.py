import sys
from pathlib import Path

import pytest

# Add src (and this directory, for gif_builder) to path
TESTS_DIR = Path(__file__).parent
sys.path.insert(0, str(TESTS_DIR.parent / "src"))
sys.path.insert(0, str(TESTS_DIR))

from engine.display_session import DisplaySession
from hardware.diagnostics import MemoryDiagnostics
from models.config import DisplayConfig
from models.frame_store import FrameStore
from utils.trace import Trace


@pytest.fixture
def display():
    """Default 151x40 geometry with the producer driving ticks itself."""
    return DisplayConfig(simulate_ticks=True)


@pytest.fixture
def frames(display):
    return FrameStore(display.width, display.height)


@pytest.fixture
def trace():
    t = Trace()
    t.start()
    return t


@pytest.fixture
def diagnostics():
    return MemoryDiagnostics()


@pytest.fixture
def session(display, diagnostics, trace):
    return DisplaySession(display, diagnostics, trace)

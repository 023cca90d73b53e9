"""Shared pytest fixtures for Pitchside tests."""

import pytest

from pitchside.core.config import BenchConfig, BoardConfig, set_config
from pitchside.core.layout import LayoutAssigner
from pitchside.core.parser import parse_roster
from pitchside.service import LayoutController


HEADER = "name,number,grade,role"


def make_sheet(rows: int) -> str:
    """Sheet text with a header and `rows` numbered players."""
    lines = [HEADER]
    for i in range(rows):
        lines.append(f"Player{i},{i + 1},{i % 3 + 1},PLY")
    return "\n".join(lines) + "\n"


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Isolate tests from PITCHSIDE_* variables and the config singleton."""
    for name in (
        "PITCHSIDE_BENCH_POLICY",
        "PITCHSIDE_FORMATION",
        "PITCHSIDE_DEPTH_SCALE",
        "PITCHSIDE_SHEET_URL",
        "PITCHSIDE_FETCH_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def config() -> BoardConfig:
    """Default board config (4-3-3, vertical bench)."""
    return BoardConfig()


@pytest.fixture
def grid_config() -> BoardConfig:
    """Config using the 4-column bench grid."""
    return BoardConfig(bench=BenchConfig(policy="grid"))


@pytest.fixture
def equal_config() -> BoardConfig:
    """Config using the equal-spacing bench."""
    return BoardConfig(bench=BenchConfig(policy="equal"))


# =============================================================================
# Roster Fixtures
# =============================================================================


@pytest.fixture
def sheet_15() -> str:
    """11 starters and 4 substitutes."""
    return make_sheet(15)


@pytest.fixture
def sheet_header_only() -> str:
    return HEADER + "\n"


@pytest.fixture
def players_15(sheet_15):
    return parse_roster(sheet_15)


@pytest.fixture
def assigner(config) -> LayoutAssigner:
    return LayoutAssigner(config)


@pytest.fixture
def controller(config) -> LayoutController:
    """Controller with nothing loaded yet."""
    return LayoutController(config)


@pytest.fixture
def loaded_controller(controller, sheet_15) -> LayoutController:
    """Controller with the 15-player roster loaded."""
    controller.load_text(sheet_15)
    return controller


@pytest.fixture
def sheet_factory():
    """Build sheet text with N numbered player rows."""
    return make_sheet

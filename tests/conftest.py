"""Shared test fixtures for hue-presets.

Provides common fixtures used across the unit tests.
"""

import pytest
from pydantic import SecretStr

from huepresets.settings import Settings
from huepresets.tui.controller import PresetController
from tests.factories import LightRecordFactory, SceneRecordFactory, mirek_entry, xy_entry
from tests.mocks import FakeBridge

# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Provide test settings with safe defaults."""
    return Settings(
        _env_file=None,
        hue_bridge_ip="192.168.1.20",
        hue_api_token=SecretStr("test-token"),
        settle_delay=0,
        status_message_timeout=0,
        env_file_path=str(tmp_path / ".env"),
    )


@pytest.fixture
def unconfigured_settings(tmp_path) -> Settings:
    """Settings as they look before `hue-presets setup` has run."""
    return Settings(_env_file=None, env_file_path=str(tmp_path / ".env"))


# =============================================================================
# BRIDGE
# =============================================================================


@pytest.fixture
def bridge() -> FakeBridge:
    """A bridge with two colored scenes (listed out of order) and two lit lights."""
    return FakeBridge(
        scenes=[
            SceneRecordFactory(
                id="evening",
                name="Evening",
                palette={"color": [xy_entry(0.5, 0.4, 80)], "color_temperature": []},
            ),
            SceneRecordFactory(
                id="bright",
                name="Bright",
                palette={"color": [], "color_temperature": [mirek_entry(233)]},
            ),
        ],
        lights=[
            LightRecordFactory(id="lamp", level=40.0),
            LightRecordFactory(id="strip", level=60.0),
        ],
    )


@pytest.fixture
def controller(bridge: FakeBridge) -> PresetController:
    """Controller with no settle delay and instantly expiring messages."""
    return PresetController(bridge, settle_delay=0, message_timeout=0)

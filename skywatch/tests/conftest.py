"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from skywatch.config.schema import NwsConfig, SkywatchConfig, UsnoConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"

NWS_TEST_URL = "https://test-nws.example.com"
USNO_TEST_URL = "https://test-usno.example.com"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def test_config() -> SkywatchConfig:
    """Config pointing both clients at test hosts."""
    return SkywatchConfig(
        nws=NwsConfig(base_url=NWS_TEST_URL),
        usno=UsnoConfig(base_url=USNO_TEST_URL),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "nws": {"user_agent": "skywatch-tests/0.1 (test@example.com)"},
        "recommendation": {"moonlight_threshold": 0.75},
        "display": {"layout": "daily", "group_by": "calendar_date"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def points_doc() -> dict:
    return load_fixture("nws_points.json")


@pytest.fixture
def hourly_doc() -> dict:
    return load_fixture("nws_forecast_hourly.json")


@pytest.fixture
def daily_doc() -> dict:
    return load_fixture("nws_forecast.json")


@pytest.fixture
def usno_doc() -> dict:
    return load_fixture("usno_oneday.json")

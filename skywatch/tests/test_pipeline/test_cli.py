"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import pytest
import respx
import yaml

from skywatch.cli import main

GRID = "https://test-nws.example.com/gridpoints/BOU/62,60"


@pytest.fixture
def test_config_path(tmp_path: Path) -> Path:
    path = tmp_path / "test.yaml"
    with open(path, "w") as f:
        yaml.dump(
            {
                "nws": {"base_url": "https://test-nws.example.com"},
                "usno": {"base_url": "https://test-usno.example.com"},
            },
            f,
        )
    return path


@pytest.fixture
def mocked_apis(points_doc: dict, hourly_doc: dict, daily_doc: dict, usno_doc: dict):
    with respx.mock(assert_all_called=False) as router:
        router.get("https://test-nws.example.com/points/39.7456,-104.9994").mock(
            return_value=httpx.Response(200, json=points_doc)
        )
        router.get(f"{GRID}/forecast/hourly", name="hourly").mock(return_value=httpx.Response(200, json=hourly_doc))
        router.get(f"{GRID}/forecast").mock(return_value=httpx.Response(200, json=daily_doc))
        router.get(url__startswith="https://test-usno.example.com/api/rstt/oneday").mock(
            return_value=httpx.Response(200, json=usno_doc)
        )
        yield router


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_config_show(self, capsys):
        result = main(["config", "show"])
        assert result == 0
        captured = capsys.readouterr()
        assert "api.weather.gov" in captured.out

    def test_config_get(self, test_config_path: Path, capsys):
        result = main(["--config", str(test_config_path), "config", "get", "nws.base_url"])
        assert result == 0
        assert "test-nws.example.com" in capsys.readouterr().out

    def test_config_get_missing(self, capsys):
        assert main(["config", "get", "nope.nothing"]) == 1

    def test_forecast_text(self, test_config_path: Path, mocked_apis, capsys):
        result = main(["--config", str(test_config_path), "forecast", "39.7456, -104.9994"])
        assert result == 0
        out = capsys.readouterr().out
        assert "Recommendation" in out
        assert "=== Monday, Oct 19th ===" in out
        assert "Sunrise: 7:13 AM" in out

    def test_forecast_json(self, test_config_path: Path, mocked_apis, capsys):
        result = main(
            ["--config", str(test_config_path), "forecast", "39.7456, -104.9994", "--format", "json"]
        )
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["ok"] is True
        assert len(data["table"]["rows"]) == 20

    def test_forecast_html(self, test_config_path: Path, mocked_apis, capsys):
        result = main(
            ["--config", str(test_config_path), "forecast", "39.7456, -104.9994", "--format", "html"]
        )
        assert result == 0
        assert '<table class="forecast">' in capsys.readouterr().out

    def test_forecast_bad_input(self, capsys):
        result = main(["forecast", "not coordinates"])
        assert result == 1
        assert "Invalid format" in capsys.readouterr().err

    def test_forecast_upstream_failure(self, test_config_path: Path, mocked_apis, capsys):
        mocked_apis["hourly"].mock(return_value=httpx.Response(503))
        result = main(["--config", str(test_config_path), "forecast", "39.7456, -104.9994"])
        assert result == 1
        assert "Error fetching data" in capsys.readouterr().err

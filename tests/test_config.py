import json

import pytest

from src.rider_schedule.config import (
    DEFAULT_SHOW_ID,
    Settings,
    ShowConfig,
    load_show_config,
    read_show_config,
)
from src.rider_schedule.errors import ConfigLoadError


def _write(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_show_config(tmp_path):
    path = _write(
        tmp_path,
        json.dumps(
            {
                "showId": 12000,
                "riderNames": ["Jane Doe", "John"],
                "classMapping": {"Young Horse": "Jeunes chevaux", "Grand Prix": "GP"},
            }
        ),
    )
    config = load_show_config(path)
    assert config.showId == 12000
    assert config.riderNames == ["Jane Doe", "John"]
    assert list(config.classMapping) == ["Young Horse", "Grand Prix"]


def test_class_mapping_keeps_file_order(tmp_path):
    path = _write(tmp_path, '{"classMapping": {"z": "1", "a": "2", "m": "3"}}')
    assert list(load_show_config(path).classMapping.items()) == [("z", "1"), ("a", "2"), ("m", "3")]


def test_missing_file_uses_defaults(tmp_path):
    config = load_show_config(tmp_path / "absent.json")
    assert config == ShowConfig()
    assert config.showId == DEFAULT_SHOW_ID == 11474
    assert config.riderNames == []
    assert config.classMapping == {}


def test_invalid_json_uses_defaults(tmp_path):
    assert load_show_config(_write(tmp_path, "{not json")) == ShowConfig()


def test_invalid_document_uses_defaults(tmp_path):
    assert load_show_config(_write(tmp_path, '{"riderNames": "Jane"}')) == ShowConfig()
    assert load_show_config(_write(tmp_path, "[1, 2]")) == ShowConfig()


def test_null_and_partial_values_fall_back_to_defaults(tmp_path):
    config = load_show_config(_write(tmp_path, '{"showId": null, "riderNames": ["Jane"], "classMapping": null}'))
    assert config.showId == DEFAULT_SHOW_ID
    assert config.riderNames == ["Jane"]
    assert config.classMapping == {}


def test_read_show_config_raises(tmp_path):
    with pytest.raises(ConfigLoadError):
        read_show_config(tmp_path / "absent.json")
    with pytest.raises(ConfigLoadError):
        read_show_config(_write(tmp_path, "nope"))


def test_with_rider_names_returns_copy():
    config = ShowConfig(riderNames=["Jane"], classMapping={"a": "b"})
    override = config.with_rider_names(["John", "Ann"])
    assert override.riderNames == ["John", "Ann"]
    assert override.classMapping == {"a": "b"}
    assert config.riderNames == ["Jane"]


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("RIDER_SCHEDULE_PACING_DELAY", "1.5")
    monkeypatch.setenv("RIDER_SCHEDULE_API_BASE_URL", "https://mirror.test")
    settings = Settings(_env_file=None)
    assert settings.pacing_delay == 1.5
    assert settings.api_base_url == "https://mirror.test"
    assert settings.output_path == "schedule.json"
    assert settings.published_output_path == "docs/schedule.json"

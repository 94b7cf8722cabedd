# tests/test_adapters/test_service_settings_loader.py
import json

import pytest

from adapters.service_settings_loader import (
    ServiceSettingsLoadError,
    find_service_settings,
    load_service_settings,
)


class TestLoadServiceSettings:
    def test_loads_pascal_case_file(self, tmp_path):
        path = tmp_path / "ServiceSettings.json"
        path.write_text(
            json.dumps({"Subscription": "sub-1", "Location": "West US", "Slot": "Staging"}),
            encoding="utf-8",
        )

        settings = load_service_settings(path)

        assert settings.subscription == "sub-1"
        assert settings.location == "West US"
        assert settings.slot == "Staging"

    def test_loads_file_with_bom(self, tmp_path):
        path = tmp_path / "ServiceSettings.json"
        path.write_bytes("\ufeff{\"Subscription\": \"sub-bom\"}".encode("utf-8"))

        assert load_service_settings(path).subscription == "sub-bom"

    def test_empty_file_yields_empty_settings(self, tmp_path):
        path = tmp_path / "ServiceSettings.json"
        path.write_text("", encoding="utf-8")

        settings = load_service_settings(path)

        assert settings.subscription is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(ServiceSettingsLoadError, match="not found"):
            load_service_settings(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "ServiceSettings.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ServiceSettingsLoadError, match="Malformed"):
            load_service_settings(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "ServiceSettings.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ServiceSettingsLoadError, match="JSON object"):
            load_service_settings(path)

    def test_wrong_field_type(self, tmp_path):
        path = tmp_path / "ServiceSettings.json"
        path.write_text(json.dumps({"Subscription": ["a", "b"]}), encoding="utf-8")

        with pytest.raises(ServiceSettingsLoadError, match="Invalid service settings"):
            load_service_settings(path)

    def test_load_error_is_value_error(self, tmp_path):
        with pytest.raises(ValueError):
            load_service_settings(tmp_path / "nope.json")


class TestFindServiceSettings:
    def test_finds_in_same_directory(self, tmp_path):
        path = tmp_path / "ServiceSettings.json"
        path.write_text("{}", encoding="utf-8")

        assert find_service_settings(tmp_path) == path.resolve()

    def test_finds_in_parent_directory(self, tmp_path):
        path = tmp_path / "ServiceSettings.json"
        path.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_service_settings(nested) == path.resolve()

    def test_closest_file_wins(self, tmp_path):
        (tmp_path / "ServiceSettings.json").write_text("{}", encoding="utf-8")
        nested = tmp_path / "svc"
        nested.mkdir()
        closest = nested / "ServiceSettings.json"
        closest.write_text("{}", encoding="utf-8")

        assert find_service_settings(nested) == closest.resolve()

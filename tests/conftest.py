# tests/conftest.py
import os

import pytest

from core.domain.models import ServiceSettings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty directory with no CSPUB_* overrides."""
    for key in [k for k in os.environ if k.startswith("CSPUB_")]:
        monkeypatch.delenv(key, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def service_settings():
    return ServiceSettings(
        subscription="f62b1e05-af8f-4205-8f98-325079adc155",
        location="West US",
        slot="Production",
        storage_service_name="mystorage",
    )


@pytest.fixture
def full_service_settings():
    return ServiceSettings(
        subscription="TestSubscription2",
        location="North Europe",
        slot="Staging",
        storage_service_name="fullstorage",
        affinity_group="my-affinity",
    )


@pytest.fixture
def service_dir(tmp_path):
    directory = tmp_path / "service"
    directory.mkdir()
    return directory


@pytest.fixture
def package_path(service_dir):
    path = service_dir / "cloud_package.cspkg"
    path.write_bytes(b"PK\x03\x04")
    return str(path)


@pytest.fixture
def config_path(service_dir):
    path = service_dir / "ServiceConfiguration.Cloud.cscfg"
    path.write_text("<ServiceConfiguration />", encoding="utf-8")
    return str(path)


class FakeProbe:
    """In-memory `PathProbe` that records every query."""

    def __init__(self, existing=()):
        self.existing = set(existing)
        self.calls = []

    def is_file(self, path):
        self.calls.append(path)
        return path in self.existing


@pytest.fixture
def fake_probe():
    return FakeProbe

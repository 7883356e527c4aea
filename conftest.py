import pytest

from tailwind_upgrade.test_utils import FakeInstaller, ProjectFactory, SpyBus


@pytest.fixture
def project_factory(tmp_path, monkeypatch):
    # Use a fixture to ensure a clean project and chdir for each test
    factory = ProjectFactory(tmp_path / "app")
    monkeypatch.chdir(tmp_path)
    return factory


@pytest.fixture
def spy_bus(monkeypatch):
    spy = SpyBus()
    with spy.patch(monkeypatch):
        yield spy


@pytest.fixture
def fake_installer():
    return FakeInstaller()

import pytest
from slimcommons.core import config


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test against the default (lenient) settings."""
    monkeypatch.setattr(config, "settings", config.Settings())
    return config.settings

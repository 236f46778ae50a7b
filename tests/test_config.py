"""Tests for FilterSettings and get_settings."""

from pathlib import Path

from podfilter.config import FilterSettings, get_settings


class TestFilterSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PODFILTER_CTR_NAMES_FIRST_CHILD_ONLY", raising=False)
        monkeypatch.delenv("PODFILTER_NETWORKS_FILE", raising=False)

        settings = FilterSettings()

        assert settings.ctr_names_first_child_only is False
        assert settings.networks_file is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PODFILTER_CTR_NAMES_FIRST_CHILD_ONLY", "1")
        monkeypatch.setenv("PODFILTER_NETWORKS_FILE", "/etc/podfilter/networks.yml")

        settings = FilterSettings()

        assert settings.ctr_names_first_child_only is True
        assert settings.networks_file == Path("/etc/podfilter/networks.yml")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("PODFILTER_CTR_NAMES_FIRST_CHILD_ONLY", "true")

        assert FilterSettings(ctr_names_first_child_only=False).ctr_names_first_child_only is False

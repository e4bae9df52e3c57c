"""
tests/core/test_core_config.py - core/config.py 테스트
"""

from unittest.mock import patch

from core.config import STABLE_STACK_STATUSES, Settings, get_default_region, get_version


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CFNAV_LANG", raising=False)
        monkeypatch.delenv("CFNAV_DEFAULT_REGION", raising=False)
        monkeypatch.delenv("AWS_PROFILE", raising=False)

        settings = Settings.from_env()

        assert settings.lang == "ko"
        assert settings.default_region == "ap-northeast-2"
        assert settings.profile is None
        assert settings.stack_statuses == STABLE_STACK_STATUSES

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CFNAV_LANG", "en")
        monkeypatch.setenv("CFNAV_DEFAULT_REGION", "us-west-2")
        monkeypatch.setenv("AWS_PROFILE", "dev")

        settings = Settings.from_env()

        assert settings.lang == "en"
        assert settings.default_region == "us-west-2"
        assert settings.profile == "dev"

    def test_stable_statuses(self):
        assert STABLE_STACK_STATUSES == ("CREATE_COMPLETE", "UPDATE_COMPLETE")


class TestGetDefaultRegion:
    def test_aws_region_first(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "eu-central-1")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")

        assert get_default_region() == "eu-central-1"

    def test_aws_default_region(self, monkeypatch):
        monkeypatch.delenv("AWS_REGION", raising=False)
        monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")

        assert get_default_region() == "us-east-1"

    def test_settings_fallback(self, monkeypatch):
        monkeypatch.delenv("AWS_REGION", raising=False)
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)

        with patch("core.config.settings", Settings(default_region="sa-east-1")):
            assert get_default_region() == "sa-east-1"


class TestGetVersion:
    def test_version_format(self):
        """x.y.z 형식"""
        parts = get_version().split(".")

        assert len(parts) >= 2
        for part in parts[:2]:
            assert part.isdigit()

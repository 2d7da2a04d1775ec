"""Tests for shared/helper/HelperConfig.py."""

import pytest

from shared.models.config import DEFAULT_SUGGESTED_SEARCHES


@pytest.mark.unit
class TestRawAccessors:
    def test_string_missing_without_default_raises(self, helper_config, monkeypatch):
        monkeypatch.delenv("SOME_MISSING_KEY", raising=False)
        with pytest.raises(ValueError, match="SOME_MISSING_KEY"):
            helper_config.get_string_val("some_missing_key")

    def test_string_is_trimmed(self, helper_config, monkeypatch):
        monkeypatch.setenv("SOME_KEY", "  value ")
        assert helper_config.get_string_val("SOME_KEY") == "value"

    def test_number_parses_int_and_float(self, helper_config, monkeypatch):
        monkeypatch.setenv("SOME_INT", "6")
        monkeypatch.setenv("SOME_FLOAT", "2.5")
        assert helper_config.get_number_val("SOME_INT") == 6
        assert helper_config.get_number_val("SOME_FLOAT") == 2.5

    def test_number_rejects_garbage(self, helper_config, monkeypatch):
        monkeypatch.setenv("SOME_INT", "six")
        with pytest.raises(ValueError, match="not a valid number"):
            helper_config.get_number_val("SOME_INT")

    def test_bool(self, helper_config, monkeypatch):
        monkeypatch.setenv("SOME_FLAG", "Yes")
        assert helper_config.get_bool_val("SOME_FLAG") is True
        monkeypatch.setenv("SOME_FLAG", "off")
        assert helper_config.get_bool_val("SOME_FLAG") is False

    def test_list_uses_semicolons(self, helper_config, monkeypatch):
        monkeypatch.setenv("SOME_LIST", "[Cases about guns, knives; Cases about speech ;]")
        assert helper_config.get_list_val("SOME_LIST") == ["Cases about guns, knives", "Cases about speech"]

    def test_list_requires_brackets(self, helper_config, monkeypatch):
        monkeypatch.setenv("SOME_LIST", "a;b")
        with pytest.raises(ValueError, match="format"):
            helper_config.get_list_val("SOME_LIST")

    def test_list_default_when_missing(self, helper_config, monkeypatch):
        monkeypatch.delenv("SOME_LIST", raising=False)
        assert helper_config.get_list_val("SOME_LIST", default=["a"]) == ["a"]


@pytest.mark.unit
class TestPageSettings:
    def test_defaults(self, helper_config, monkeypatch):
        for key in (
            "PAGE_SIZE",
            "PAGE_RECENT_SEARCHES_LIMIT",
            "PAGE_SUGGESTED_SEARCHES",
            "PAGE_RECOVER_FROM_ERRORS",
            "PAGE_REFRESH_SECONDS",
        ):
            monkeypatch.delenv(key, raising=False)

        settings = helper_config.get_page_settings()

        assert settings.page_size == 6
        assert settings.recent_searches_limit == 5
        assert settings.suggested_searches == DEFAULT_SUGGESTED_SEARCHES
        assert len(settings.suggested_searches) == 12
        assert settings.recover_from_errors is False

    def test_overrides(self, helper_config, monkeypatch):
        monkeypatch.setenv("PAGE_SIZE", "10")
        monkeypatch.setenv("PAGE_SUGGESTED_SEARCHES", "[Cases involving guns]")
        monkeypatch.setenv("PAGE_RECOVER_FROM_ERRORS", "true")

        settings = helper_config.get_page_settings()

        assert settings.page_size == 10
        assert settings.suggested_searches == ["Cases involving guns"]
        assert settings.recover_from_errors is True

    def test_rejects_zero_page_size(self, helper_config, monkeypatch):
        monkeypatch.setenv("PAGE_SIZE", "0")
        with pytest.raises(ValueError, match="PAGE_SIZE"):
            helper_config.get_page_settings()

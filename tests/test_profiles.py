"""Tests for searchpages.profiles and searchpages.settings."""

from __future__ import annotations

import pytest
import yaml
from pydantic import ValidationError

from searchpages.profiles import load_settings
from searchpages.settings import DEFAULT_FALLBACK_SELECTOR, ExtractionSettings, xpath_literal

PROFILE = """
default:
  fallback_selector: //main
domains:
  example.com:
    section_marker_values: [section-master]
  docs.example.com:
    section_marker_values: [faq]
    fallback_selector: //article
"""


@pytest.fixture
def profile_path(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text(PROFILE, encoding="utf-8")
    return path


class TestLoadSettings:
    def test_default_only_without_url(self, profile_path):
        settings = load_settings(profile_path)
        assert settings.fallback_selector == "//main"
        assert settings.section_marker_values == ExtractionSettings().section_marker_values

    def test_longest_domain_wins(self, profile_path):
        settings = load_settings(profile_path, "https://docs.example.com/guide")
        assert settings.section_marker_values == ("faq",)
        assert settings.fallback_selector == "//article"

    def test_parent_domain_match(self, profile_path):
        settings = load_settings(profile_path, "https://www.example.com/")
        assert settings.section_marker_values == ("section-master",)
        assert settings.fallback_selector == "//main"

    def test_unrelated_domain(self, profile_path):
        settings = load_settings(profile_path, "https://notexample.com/")
        assert settings.section_marker_values == ExtractionSettings().section_marker_values
        assert settings.fallback_selector == "//main"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path, "https://example.com") == ExtractionSettings()

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        assert load_settings(path) == ExtractionSettings()

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("default: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_settings(path)

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("default:\n  fallback_selectr: //main\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_settings(path)


class TestExtractionSettings:
    def test_defaults(self):
        settings = ExtractionSettings()
        assert settings.fallback_selector == DEFAULT_FALLBACK_SELECTOR
        assert settings.section_selector == (
            "//div[@ocr-component-name='section-master' "
            "or @ocr-component-name='interactive-demo']"
        )

    def test_blank_fallback_rejected(self):
        with pytest.raises(ValidationError):
            ExtractionSettings(fallback_selector="  ")

    def test_no_marker_values_matches_nothing(self):
        assert ExtractionSettings(section_marker_values=()).section_selector.endswith("[false()]")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("plain", "'plain'"),
            ("it's", '"it\'s"'),
            ("a'b\"c", "concat('a', \"'\", 'b\"c')"),
        ],
    )
    def test_xpath_literal(self, value, expected):
        assert xpath_literal(value) == expected

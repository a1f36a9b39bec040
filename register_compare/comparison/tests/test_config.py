"""
Tests for comparison.config module.
"""
from __future__ import annotations

import pytest

from register_compare.comparison.config import ComparisonConfig


class TestComparisonConfig:
    """Tests for ComparisonConfig class."""

    def test_defaults(self):
        """Test that defaults are loaded from config.yaml."""
        config = ComparisonConfig()

        assert config.name_variation_threshold == 80
        assert config.corroborating_events == ['birth', 'death']
        assert config.event_types == ['birth', 'death', 'christening', 'burial']
        assert config.compare_marriages is True
        assert config.quality_bands['Excellent'] == 90

    def test_default_enabled(self):
        """Test that facets are enabled by default."""
        config = ComparisonConfig()

        assert config.is_enabled('events') is True
        assert config.is_enabled('any_facet') is True

    def test_from_dict_merges_facets(self):
        """Test that a partial facets override keeps the other toggles."""
        config = ComparisonConfig.from_dict({'facets': {'events': False}})

        assert config.is_enabled('events') is False
        assert config.is_enabled('people') is True

    def test_from_dict_unknown_key(self, caplog):
        """Test that unknown keys are ignored with a warning."""
        config = ComparisonConfig.from_dict({'colour': 'blue'})

        assert not hasattr(config, 'colour')
        assert 'colour' in caplog.text

    @pytest.mark.parametrize(
        "data",
        [
            {'name_variation_threshold': 101},
            {'name_variation_threshold': -1},
            {'event_types': ['birth', 'marriage']},
            {'corroborating_events': ['baptism']},
        ]
    )
    def test_from_dict_invalid(self, data):
        """Test that invalid values are rejected."""
        with pytest.raises(ValueError):
            ComparisonConfig.from_dict(data)

    def test_from_yaml_flat(self, tmp_path):
        """Test loading settings from the top level of a file."""
        config_file = tmp_path / "flat.yaml"
        config_file.write_text("name_variation_threshold: 90\ncompare_marriages: false\n", encoding="utf-8")

        config = ComparisonConfig.from_yaml(config_file)

        assert config.name_variation_threshold == 90
        assert config.compare_marriages is False
        assert config.event_types == ['birth', 'death', 'christening', 'burial']

    def test_from_yaml_section(self, tmp_path):
        """Test loading settings from a 'comparison' section."""
        config_file = tmp_path / "app.yaml"
        config_file.write_text("other_tool:\n  x: 1\ncomparison:\n  corroborating_events: [death]\n", encoding="utf-8")

        config = ComparisonConfig.from_yaml(config_file)

        assert config.corroborating_events == ['death']

    def test_from_yaml_missing(self, tmp_path):
        """Test that a missing file raises."""
        with pytest.raises(FileNotFoundError):
            ComparisonConfig.from_yaml(tmp_path / "missing.yaml")

    def test_from_yaml_invalid(self, tmp_path):
        """Test that malformed YAML raises ValueError."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("facets: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError):
            ComparisonConfig.from_yaml(config_file)

    def test_facet_settings_dict(self):
        """Test facet toggles given as settings dictionaries."""
        config = ComparisonConfig.from_dict({'facets': {'events': {'enabled': False}, 'people': {}}})

        assert config.is_enabled('events') is False
        assert config.is_enabled('people') is True

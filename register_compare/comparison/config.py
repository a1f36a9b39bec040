from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from register_compare.person import EVENT_TYPES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent / "config.yaml"


def _read_yaml(yaml_path: Path) -> Dict[str, Any]:
    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {yaml_path}: {e}")


@dataclass
class ComparisonConfig:
    """
    Configuration for matching and comparing two pages.

    Defaults are loaded from config.yaml in the comparison directory; use
    from_dict() or from_yaml() to override individual settings.
    """
    # Matching
    name_variation_threshold: int = field(init=False)
    corroborating_events: List[str] = field(init=False)

    # Events facet
    event_types: List[str] = field(init=False)
    compare_marriages: bool = field(init=False)

    # Facet toggles (facet_id -> enabled)
    facets: Dict[str, bool] = field(init=False)

    # Quality verdict bands (label -> minimum average F1)
    quality_bands: Dict[str, float] = field(init=False)

    def __post_init__(self):
        """Load defaults from the packaged YAML file."""
        if not DEFAULT_CONFIG_FILE.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {DEFAULT_CONFIG_FILE}. "
                "Please ensure config.yaml exists in the comparison directory."
            )
        defaults = _read_yaml(DEFAULT_CONFIG_FILE)
        for key in self.__dataclass_fields__.keys():
            if key not in defaults:
                raise ValueError(f"Required configuration field '{key}' not found in config.yaml")
        self._apply(defaults)

    def _apply(self, config_dict: Dict[str, Any]) -> None:
        for key, value in config_dict.items():
            if key not in self.__dataclass_fields__:
                logger.warning(f"Ignoring unknown comparison config key '{key}'")
                continue
            if key == 'facets':
                # merge so that a partial override keeps the other toggles
                toggles = {
                    facet_id: settings.get('enabled', True) if isinstance(settings, dict) else bool(settings)
                    for facet_id, settings in (value or {}).items()
                }
                value = {**getattr(self, 'facets', {}), **toggles}
            setattr(self, key, value)
        self._validate()

    def _validate(self) -> None:
        if not 0 <= self.name_variation_threshold <= 100:
            raise ValueError(f"name_variation_threshold must be between 0 and 100, got {self.name_variation_threshold}")
        for event_type in list(self.corroborating_events) + list(self.event_types):
            if event_type not in EVENT_TYPES:
                raise ValueError(f"Unknown event type '{event_type}', expected one of {EVENT_TYPES}")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> ComparisonConfig:
        """
        Create configuration from a dictionary, on top of the packaged defaults.

        Useful for testing and programmatic configuration.

        Args:
            config_dict: Settings to override, e.g. {'facets': {'events': False}}.

        Returns:
            ComparisonConfig instance
        """
        instance = cls()
        instance._apply(config_dict or {})
        return instance

    @classmethod
    def from_yaml(cls, yaml_path: Optional[Path]) -> ComparisonConfig:
        """
        Load configuration from a YAML file.

        Settings are read from a 'comparison' section if present, otherwise from
        the top level of the file.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            ComparisonConfig: Configuration instance loaded from YAML.
        """
        if not yaml_path or not Path(yaml_path).exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
        data = _read_yaml(Path(yaml_path))
        section = data.get('comparison', data)
        logger.info(f"Loaded comparison config from {yaml_path}")
        return cls.from_dict(section)

    def is_enabled(self, facet_id: str) -> bool:
        # default: enabled unless explicitly false
        return self.facets.get(facet_id, True)

    def verdict(self, average_f1: float) -> str:
        """
        Map an average F1 score (percent) to a quality label.

        Returns:
            str: The best band whose minimum is met, or 'Poor'.
        """
        for label, minimum in sorted(self.quality_bands.items(), key=lambda item: item[1], reverse=True):
            if average_f1 >= minimum:
                return label
        return 'Poor'

"""
Village generator options.

Options are validated before any layout work; a value outside its documented
range raises ConfigurationError naming the option. Options can be loaded
from and saved to a JSON file.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from settings import HOUSE_SIZE, VILLAGER_PADDING
from engine.error_handler import ConfigurationError

logger = logging.getLogger("note_village.config")


# Config file location
CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"
VILLAGE_CONFIG_FILE = CONFIG_DIR / "village_settings.json"

# Keys used by the plugin's own settings file
CAMEL_CASE_KEYS = {
    "topTagCount": "top_tag_count",
    "maxVillagers": "max_villagers",
    "plazaRadius": "plaza_radius",
    "zoneInnerRadius": "zone_inner_radius",
    "zoneWidth": "zone_width",
    "housesPerVillager": "houses_per_villager",
    "decorationDensity": "decoration_density",
    "excludedFolders": "excluded_folders",
    "excludedTags": "excluded_tags",
    "prioritizeStaleNotes": "prioritize_stale_notes",
    "villageSeed": "seed",
}

TOP_TAG_COUNT_RANGE = (3, 20)
MAX_VILLAGERS_RANGE = (10, 500)
# Zones must keep a padded interior for villager homes
MIN_ZONE_WIDTH = 2 * VILLAGER_PADDING


@dataclass
class VillageGeneratorOptions:
    """Complete generator configuration."""
    seed: str
    top_tag_count: int = 10
    max_villagers: int = 100
    plaza_radius: float = 100.0
    zone_inner_radius: float = 150.0
    zone_width: float = 300.0
    houses_per_villager: float = 0.3
    decoration_density: float = 0.1
    excluded_folders: List[str] = field(default_factory=list)
    excluded_tags: List[str] = field(default_factory=list)
    # Oldest notes get villager slots first when True
    prioritize_stale_notes: bool = True

    def validate(self) -> VillageGeneratorOptions:
        """
        Check every option against its documented bound.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigurationError: for the first option that is out of range
        """
        if not isinstance(self.seed, str) or not self.seed:
            raise ConfigurationError("seed", "must be a non-empty string")

        _check_int("top_tag_count", self.top_tag_count, *TOP_TAG_COUNT_RANGE)
        _check_int("max_villagers", self.max_villagers, *MAX_VILLAGERS_RANGE)

        _check_number("plaza_radius", self.plaza_radius)
        if self.plaza_radius <= 0:
            raise ConfigurationError("plaza_radius", f"must be positive, got {self.plaza_radius}")

        _check_number("zone_inner_radius", self.zone_inner_radius)
        if self.zone_inner_radius < self.plaza_radius:
            raise ConfigurationError(
                "zone_inner_radius",
                f"must be at least plaza_radius ({self.plaza_radius}), got {self.zone_inner_radius}",
            )

        _check_number("zone_width", self.zone_width)
        if self.zone_width <= MIN_ZONE_WIDTH or self.zone_width < HOUSE_SIZE:
            raise ConfigurationError(
                "zone_width",
                f"must be greater than {MIN_ZONE_WIDTH} and at least {HOUSE_SIZE}, got {self.zone_width}",
            )

        _check_probability("houses_per_villager", self.houses_per_villager)
        _check_probability("decoration_density", self.decoration_density)

        for name in ("excluded_folders", "excluded_tags"):
            value = getattr(self, name)
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                raise ConfigurationError(name, "must be a list of strings")

        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VillageGeneratorOptions:
        """
        Build options from a mapping, accepting snake_case or camelCase keys.

        Unknown keys are ignored with a warning. The result is validated.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                logger.warning(f"Ignoring unknown generator option '{key}'")
                continue
            kwargs[name] = value

        if "seed" not in kwargs:
            raise ConfigurationError("seed", "is required")

        return cls(**kwargs).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def load(
        cls,
        config_file: Optional[Path] = None,
        seed: Optional[str] = None,
        default_seed: Optional[str] = None,
    ) -> VillageGeneratorOptions:
        """
        Load options from a JSON file.

        Args:
            config_file: Path to the file (defaults to the standard location)
            seed: Seed that overrides the file's seed
            default_seed: Seed used only when neither ``seed`` nor the file has one

        Returns:
            Validated VillageGeneratorOptions; defaults when the file is missing

        Raises:
            ConfigurationError: when the file is malformed or an option is invalid
        """
        if config_file is None:
            config_file = VILLAGE_CONFIG_FILE

        data: Dict[str, Any] = {}
        if not config_file.exists():
            logger.info(f"Village config file not found at {config_file}, using defaults.")
        else:
            try:
                with config_file.open("r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigurationError("config_file", f"cannot read {config_file}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigurationError("config_file", f"{config_file} must contain a JSON object")

        if seed is not None:
            data = {**data, "seed": seed}
        elif default_seed is not None and not _has_seed(data):
            data = {**data, "seed": default_seed}

        return cls.from_dict(data)

    def save(self, config_file: Optional[Path] = None) -> bool:
        """
        Save options to a JSON file.

        Returns:
            True if saved successfully, False otherwise
        """
        if config_file is None:
            config_file = VILLAGE_CONFIG_FILE

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with config_file.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.error(f"Error saving village config: {e}")
            return False


def _has_seed(data: Mapping[str, Any]) -> bool:
    return any(CAMEL_CASE_KEYS.get(key, key) == "seed" for key in data)


def _check_int(name: str, value: Any, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(name, f"must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ConfigurationError(name, f"must be between {low} and {high}, got {value}")


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigurationError(name, f"must be a finite number, got {value!r}")


def _check_probability(name: str, value: Any) -> None:
    _check_number(name, value)
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(name, f"must be between 0 and 1, got {value}")


def load_generator_options(
    config_file: Optional[Path] = None,
    seed: Optional[str] = None,
    default_seed: Optional[str] = None,
) -> VillageGeneratorOptions:
    """
    Convenience function to load generator options.

    Args:
        config_file: Optional path to config file
        seed: Optional seed override
        default_seed: Optional seed for a file without one

    Returns:
        VillageGeneratorOptions instance
    """
    return VillageGeneratorOptions.load(config_file, seed, default_seed)

"""
Unit tests for generator options and their JSON config file.
"""

import json

import pytest
from engine.error_handler import ConfigurationError, VillageError
from world.generation import VillageGeneratorOptions, load_generator_options


class TestDefaults:
    """Tests for default values."""

    def test_defaults(self):
        options = VillageGeneratorOptions.from_dict({"seed": "abc"})
        assert options.top_tag_count == 10
        assert options.max_villagers == 100
        assert options.plaza_radius == 100.0
        assert options.zone_inner_radius == 150.0
        assert options.zone_width == 300.0
        assert options.houses_per_villager == 0.3
        assert options.decoration_density == 0.1
        assert options.excluded_folders == []
        assert options.excluded_tags == []
        assert options.prioritize_stale_notes is True

    def test_camel_case_keys(self):
        options = VillageGeneratorOptions.from_dict({
            "villageSeed": "abc",
            "topTagCount": 5,
            "maxVillagers": 50,
            "excludedFolders": ["templates"],
        })
        assert options.seed == "abc"
        assert options.top_tag_count == 5
        assert options.max_villagers == 50
        assert options.excluded_folders == ["templates"]

    def test_unknown_keys_ignored(self):
        options = VillageGeneratorOptions.from_dict({"seed": "abc", "showMinimap": True})
        assert options.seed == "abc"

    def test_seed_required(self):
        with pytest.raises(ConfigurationError) as exc_info:
            VillageGeneratorOptions.from_dict({"topTagCount": 5})
        assert exc_info.value.option == "seed"


class TestValidation:
    """Every option is checked against its bound."""

    @pytest.mark.parametrize("option,value", [
        ("seed", ""),
        ("top_tag_count", 2),
        ("top_tag_count", 21),
        ("top_tag_count", 5.5),
        ("top_tag_count", True),
        ("max_villagers", 9),
        ("max_villagers", 501),
        ("plaza_radius", 0),
        ("plaza_radius", float("nan")),
        ("zone_inner_radius", 50),
        ("zone_width", -1),
        ("zone_width", 20.0),
        ("zone_width", 60),
        ("houses_per_villager", 1.5),
        ("houses_per_villager", -0.1),
        ("decoration_density", 2),
        ("excluded_folders", "archive"),
        ("excluded_tags", [1, 2]),
    ])
    def test_out_of_range_rejected(self, option, value):
        with pytest.raises(ConfigurationError) as exc_info:
            VillageGeneratorOptions.from_dict({"seed": "abc", option: value})
        assert exc_info.value.option == option
        assert option in str(exc_info.value)

    @pytest.mark.parametrize("option,value", [
        ("top_tag_count", 3),
        ("top_tag_count", 20),
        ("max_villagers", 10),
        ("max_villagers", 500),
        ("houses_per_villager", 0),
        ("houses_per_villager", 1),
        ("decoration_density", 0.0),
        ("zone_inner_radius", 100),
        ("zone_width", 61),
    ])
    def test_bounds_are_inclusive(self, option, value):
        options = VillageGeneratorOptions.from_dict({"seed": "abc", option: value})
        assert getattr(options, option) == value

    def test_configuration_error_is_village_error(self):
        error = ConfigurationError("max_villagers", "too big")
        assert isinstance(error, VillageError)
        assert error.user_message == "Invalid option 'max_villagers': too big"

    def test_zone_width_error_names_minimum(self):
        with pytest.raises(ConfigurationError) as exc_info:
            VillageGeneratorOptions.from_dict({"seed": "abc", "zone_width": 20.0})
        assert "60" in exc_info.value.reason
        assert "48" in exc_info.value.reason


class TestConfigFile:
    """Loading and saving the JSON config file."""

    def test_missing_file_uses_defaults(self, tmp_path):
        options = VillageGeneratorOptions.load(tmp_path / "missing.json", seed="abc")
        assert options == VillageGeneratorOptions.from_dict({"seed": "abc"})

    def test_missing_file_without_seed_fails(self, tmp_path):
        with pytest.raises(ConfigurationError):
            VillageGeneratorOptions.load(tmp_path / "missing.json")

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config" / "village.json"
        options = VillageGeneratorOptions.from_dict({"seed": "abc", "max_villagers": 42})
        assert options.save(path)
        assert load_generator_options(path) == options

    def test_seed_argument_overrides_file(self, tmp_path):
        path = tmp_path / "village.json"
        path.write_text(json.dumps({"seed": "file", "topTagCount": 4}), encoding="utf-8")
        options = VillageGeneratorOptions.load(path, seed="cli")
        assert options.seed == "cli"
        assert options.top_tag_count == 4

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "village.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            VillageGeneratorOptions.load(path, seed="abc")
        assert exc_info.value.option == "config_file"

    def test_non_object_file(self, tmp_path):
        path = tmp_path / "village.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            VillageGeneratorOptions.load(path, seed="abc")


class TestDefaultSeed:
    """Fallback seed for config files that carry none."""

    def test_file_without_seed_uses_default(self, tmp_path):
        path = tmp_path / "village.json"
        path.write_text(json.dumps({"max_villagers": 50}), encoding="utf-8")
        options = VillageGeneratorOptions.load(path, default_seed="myvault")
        assert options.seed == "myvault"
        assert options.max_villagers == 50

    def test_file_seed_beats_default(self, tmp_path):
        path = tmp_path / "village.json"
        path.write_text(json.dumps({"villageSeed": "from-file"}), encoding="utf-8")
        assert VillageGeneratorOptions.load(path, default_seed="myvault").seed == "from-file"

    def test_seed_argument_beats_file_and_default(self, tmp_path):
        path = tmp_path / "village.json"
        path.write_text(json.dumps({"seed": "from-file"}), encoding="utf-8")
        options = load_generator_options(path, seed="cli", default_seed="myvault")
        assert options.seed == "cli"

    def test_missing_file_uses_default(self, tmp_path):
        options = VillageGeneratorOptions.load(tmp_path / "missing.json", default_seed="myvault")
        assert options.seed == "myvault"

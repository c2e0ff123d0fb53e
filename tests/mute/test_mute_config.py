"""Tests for mute plugin configuration."""
from pathlib import Path

import pytest

from roommod.mute import ConfigError, MuteConfig, load_config
from roommod.mute.config import DEFAULT_MUTE_MESSAGE


class TestMuteConfigDefaults:
    def test_defaults(self):
        config = MuteConfig()
        assert config.mute_message == DEFAULT_MUTE_MESSAGE
        assert config.protected_roles == ("host", "admin")
        assert config.allowed_roles == ("admin",)
        assert config.allow_talking_when_captain is False


class TestFromDict:
    def test_camel_case_keys(self):
        config = MuteConfig.from_dict({
            "muteMessage": "Quiet!",
            "protectedRoles": ["host"],
            "allowedRoles": ["admin", "admin"],
            "allowTalkingWhenCaptain": True,
        })
        assert config.mute_message == "Quiet!"
        assert config.protected_roles == ("host",)
        assert config.allowed_roles == ("admin",)
        assert config.allow_talking_when_captain is True

    def test_snake_case_keys(self):
        config = MuteConfig.from_dict({"allowed_roles": ["mod", "admin"]})
        assert config.allowed_roles == ("mod", "admin")

    def test_missing_keys_use_defaults(self):
        assert MuteConfig.from_dict({}) == MuteConfig()

    def test_non_list_roles_become_empty(self):
        config = MuteConfig.from_dict({"protectedRoles": "admin"})
        assert config.protected_roles == ()

    @pytest.mark.parametrize("value,expected", [
        ("yes", True), ("TRUE", True), ("1", True), ("no", False), ("0", False), (False, False),
    ])
    def test_string_booleans(self, value, expected):
        config = MuteConfig.from_dict({"allowTalkingWhenCaptain": value})
        assert config.allow_talking_when_captain is expected

    def test_unrecognised_boolean_falls_back(self, caplog):
        config = MuteConfig.from_dict({"allowTalkingWhenCaptain": "ture"})
        assert config.allow_talking_when_captain is False
        assert "Unrecognised boolean value" in caplog.text


class TestLoadConfig:
    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "mute.yaml"
        path.write_text("muteMessage: Hush\nallowedRoles:\n  - admin\n  - mod\n")
        config = load_config(path)
        assert config.mute_message == "Hush"
        assert config.allowed_roles == ("admin", "mod")

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "mute.yaml"
        path.write_text("")
        assert load_config(path) == MuteConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "mute.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

"""Tests for YAML configuration loading."""

import pytest

import yaml

from artifact_session.common.config import expand_env_vars, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_mapping(self, tmp_path):
        """Test loading a mapping document."""
        config_file = tmp_path / "request.yaml"
        config_file.write_text("offline: true\nuser_properties:\n  skipTests: 'true'\n")

        config = load_config(str(config_file))

        assert config == {"offline": True, "user_properties": {"skipTests": "true"}}

    def test_missing_file(self, tmp_path):
        """Test missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_document(self, tmp_path):
        """Test an empty document loads as an empty mapping."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert load_config(str(config_file)) == {}

    def test_non_mapping_root(self, tmp_path):
        """Test a list root is rejected."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(TypeError):
            load_config(str(config_file))

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML propagates the parser error."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("servers: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            load_config(str(config_file))

    def test_env_var_expansion(self, tmp_path, monkeypatch):
        """Test environment variables are expanded in nested strings."""
        monkeypatch.setenv("REPO_PASSWORD", "from-env")
        config_file = tmp_path / "env.yaml"
        config_file.write_text(
            "servers:\n  - id: central\n    password: ${REPO_PASSWORD}\n    port: 3128\n"
        )

        config = load_config(str(config_file))

        assert config["servers"][0]["password"] == "from-env"
        assert config["servers"][0]["port"] == 3128

    def test_unknown_env_var_left_as_is(self, tmp_path, monkeypatch):
        """Test unset variables are left unexpanded."""
        monkeypatch.delenv("NOT_SET_ANYWHERE", raising=False)
        config_file = tmp_path / "env.yaml"
        config_file.write_text("value: $NOT_SET_ANYWHERE\n")

        assert load_config(str(config_file))["value"] == "$NOT_SET_ANYWHERE"

    def test_directory_is_not_a_document(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path)


class TestExpandEnvVars:
    """Tests for environment reference expansion."""

    def test_default_used_when_unset(self, monkeypatch):
        """Test ${NAME:-default} falls back to the default."""
        monkeypatch.delenv("PROXY_PORT", raising=False)

        assert expand_env_vars("${PROXY_PORT:-3128}") == "3128"

    def test_set_variable_beats_default(self, monkeypatch):
        monkeypatch.setenv("PROXY_PORT", "8080")

        assert expand_env_vars("${PROXY_PORT:-3128}") == "8080"

    def test_embedded_references(self, monkeypatch):
        """Test several references inside one string."""
        monkeypatch.setenv("REPO_HOST", "nexus.example.com")
        monkeypatch.delenv("REPO_PATH", raising=False)

        value = expand_env_vars("https://$REPO_HOST/${REPO_PATH:-maven}")

        assert value == "https://nexus.example.com/maven"

    def test_keys_and_scalars_untouched(self, monkeypatch):
        """Test mapping keys and non-string values are not expanded."""
        monkeypatch.setenv("KEY", "expanded")

        assert expand_env_vars({"$KEY": 1, "flag": True, "items": ["$KEY"]}) == {
            "$KEY": 1,
            "flag": True,
            "items": ["expanded"],
        }

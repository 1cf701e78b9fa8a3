"""Unit tests for settings loading and validation."""

from pathlib import Path

import pytest

from conftest import ADMIN_SECRET, ENDPOINT
from core.config import AppSettings, load_settings
from core.domain.models import CustomScalarFormat
from core.domain.schema_format import SchemaFormat
from core.errors import ConfigurationError


class TestLoadSettings:
    def test_reads_required_vars(self, env):
        settings = load_settings()
        assert isinstance(settings, AppSettings)
        assert settings.api_base_url == ENDPOINT
        assert settings.schema_path == "schema"
        assert settings.admin_secret.get_secret_value() == ADMIN_SECRET

    def test_defaults(self, env):
        settings = load_settings()
        assert settings.source_root is None
        assert settings.target_folder == "LucraSports"
        assert settings.output_folder == "GeneratedAPI/Operations"
        assert settings.schema_format is SchemaFormat.SDL
        assert settings.async_client is True
        assert settings.log_level == "INFO"
        assert settings.custom_scalar_format is CustomScalarFormat.PASSTHROUGH

    def test_reads_prefixed_optional_vars(self, env, monkeypatch, tmp_path):
        monkeypatch.setenv("CODEGEN_SOURCE_ROOT", str(tmp_path))
        monkeypatch.setenv("CODEGEN_TARGET_FOLDER", "App")
        monkeypatch.setenv("CODEGEN_OUTPUT_FOLDER", "build/api_client")
        monkeypatch.setenv("CODEGEN_SCHEMA_FORMAT", "json")
        monkeypatch.setenv("CODEGEN_ASYNC_CLIENT", "false")
        monkeypatch.setenv("CODEGEN_LOG_LEVEL", "debug")
        monkeypatch.setenv("CODEGEN_CUSTOM_SCALAR_FORMAT", "none")
        settings = load_settings()
        assert settings.source_root == Path(tmp_path)
        assert settings.target_folder == "App"
        assert settings.output_folder == "build/api_client"
        assert settings.schema_format is SchemaFormat.JSON
        assert settings.async_client is False
        assert settings.log_level == "DEBUG"
        assert settings.custom_scalar_format is CustomScalarFormat.NONE

    def test_secret_is_not_in_repr(self, env):
        assert ADMIN_SECRET not in repr(load_settings())


class TestMissingConfiguration:
    def test_all_missing(self, project_root):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()
        message = str(exc_info.value)
        assert "API_BASE_URL" in message
        assert "APOLLO_SCHEMA_PATH" in message
        assert "HASURA_ADMIN_SECRET" in message

    def test_names_only_the_missing_variable(self, env, monkeypatch):
        monkeypatch.delenv("HASURA_ADMIN_SECRET")
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings()
        message = str(exc_info.value)
        assert "HASURA_ADMIN_SECRET" in message
        assert "API_BASE_URL" not in message

    def test_blank_schema_path_is_rejected(self, env, monkeypatch):
        monkeypatch.setenv("APOLLO_SCHEMA_PATH", "   ")
        with pytest.raises(ConfigurationError, match="APOLLO_SCHEMA_PATH"):
            load_settings()

    def test_unknown_log_level_is_rejected(self, env, monkeypatch):
        monkeypatch.setenv("CODEGEN_LOG_LEVEL", "chatty")
        with pytest.raises(ConfigurationError, match="CODEGEN_LOG_LEVEL"):
            load_settings()

"""Unit tests for project path resolution."""

import pytest

from core.config import load_settings
from core.errors import ConfigurationError
from core.file_structure import FileStructure, child_path


class TestResolve:
    def test_defaults_to_cwd(self, env):
        fs = FileStructure.resolve(load_settings())
        assert fs.source_root == env.resolve()

    def test_uses_configured_root(self, env, monkeypatch, tmp_path_factory):
        other = tmp_path_factory.mktemp("project")
        monkeypatch.setenv("CODEGEN_SOURCE_ROOT", str(other))
        fs = FileStructure.resolve(load_settings())
        assert fs.source_root == other.resolve()

    def test_missing_root_raises(self, env, monkeypatch):
        monkeypatch.setenv("CODEGEN_SOURCE_ROOT", str(env / "does-not-exist"))
        with pytest.raises(ConfigurationError, match="source root"):
            FileStructure.resolve(load_settings())

    def test_cli_folder_contains_the_tool(self, env):
        fs = FileStructure.resolve(load_settings())
        assert (fs.cli_folder / "core" / "file_structure.py").is_file()

    def test_is_immutable(self, env):
        fs = FileStructure.resolve(load_settings())
        with pytest.raises(AttributeError):
            fs.source_root = env  # type: ignore[misc]


class TestChildPath:
    def test_nested_name(self, tmp_path):
        assert child_path(tmp_path, "GeneratedAPI/Operations") == tmp_path / "GeneratedAPI" / "Operations"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_empty(self, tmp_path, name):
        with pytest.raises(ConfigurationError):
            child_path(tmp_path, name)

    def test_rejects_absolute(self, tmp_path):
        with pytest.raises(ConfigurationError):
            child_path(tmp_path, str(tmp_path / "abs"))

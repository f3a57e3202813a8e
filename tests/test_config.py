"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from doctree.config import Config, DocsConfig, ServerConfig, TreeConfig


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "doctree.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[docs]
source_dir = "documentation"

[tree]
index_key = "README"
inherit_index = true
ignore = [".git", "node_modules"]
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.docs.source_dir == tmp_path / "documentation"
        assert config.tree.index_key == "README"
        assert config.tree.inherit_index is True
        assert config.tree.ignore == [".git", "node_modules"]
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults relative to config file."""
        config_file = tmp_path / "doctree.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.docs.source_dir == tmp_path / "docs"
        assert config.tree.index_key == "index"
        assert config.tree.inherit_index is False
        assert config.tree.ignore == [".git"]

    def test__missing_explicit_path__raises_error(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for missing explicit config file."""
        config_file = tmp_path / "nonexistent.toml"

        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(config_file)

    def test__no_path_no_discovery__returns_defaults(self) -> None:
        """Return defaults when no config file found."""
        with patch.object(Config, "_discover_config", return_value=None):
            config = Config.load()

        assert config.server.host == "127.0.0.1"
        assert config.docs.source_dir == Path("docs")
        assert config.tree == TreeConfig()
        assert config.config_path is None

    def test__discovered_path__loads_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "doctree.toml"
        config_file.write_text("[tree]\ninherit_index = true")

        with patch.object(Config, "_discover_config", return_value=config_file):
            config = Config.load()

        assert config.tree.inherit_index is True
        assert config.config_path == config_file


class TestConfigDiscovery:
    """Tests for config file discovery."""

    def test__config_in_current_dir__found(self, tmp_path: Path) -> None:
        """Find config in current directory."""
        config_file = tmp_path / "doctree.toml"
        config_file.write_text("[server]\nport = 9000")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = Config._discover_config()

        assert discovered == config_file

    def test__config_in_parent_dir__found(self, tmp_path: Path) -> None:
        """Find config in parent directory."""
        config_file = tmp_path / "doctree.toml"
        config_file.write_text("[server]\nport = 9000")
        subdir = tmp_path / "sub" / "dir"
        subdir.mkdir(parents=True)

        with patch("pathlib.Path.cwd", return_value=subdir):
            discovered = Config._discover_config()

        assert discovered == config_file


class TestConfigValidation:
    """Tests for invalid configuration values."""

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ('server = "oops"', "server section must be a dictionary"),
            ('[server]\nhost = 1', "server.host must be a string"),
            ('[server]\nport = "80"', "server.port must be an integer"),
            ('[server]\nport = true', "server.port must be an integer"),
            ('docs = 1', "docs section must be a dictionary"),
            ('[docs]\nsource_dir = 1', "docs.source_dir must be a string"),
            ('tree = []', "tree section must be a dictionary"),
            ('[tree]\nindex_key = ""', "tree.index_key must be a non-empty string"),
            ('[tree]\nindex_key = 1', "tree.index_key must be a non-empty string"),
            ('[tree]\ninherit_index = "yes"', "tree.inherit_index must be a boolean"),
            ('[tree]\nignore = ".git"', "tree.ignore must be a list"),
            ('[tree]\nignore = [1]', "tree.ignore items must be strings"),
        ],
    )
    def test__invalid_value__raises_error(
        self,
        tmp_path: Path,
        content: str,
        message: str,
    ) -> None:
        config_file = tmp_path / "doctree.toml"
        config_file.write_text(content)

        with pytest.raises(ValueError, match=message):
            Config.load(config_file)


class TestConfigWithOverrides:
    """Tests for Config.with_overrides()."""

    @pytest.fixture
    def config(self) -> Config:
        return Config(
            server=ServerConfig(),
            docs=DocsConfig(source_dir=Path("docs")),
            tree=TreeConfig(),
        )

    def test__no_overrides__returns_equal_config(self, config: Config) -> None:
        assert config.with_overrides() == config

    def test__overrides_server(self, config: Config) -> None:
        result = config.with_overrides(host="0.0.0.0", port=9000)

        assert result.server == ServerConfig(host="0.0.0.0", port=9000)
        assert config.server == ServerConfig()

    def test__partial_server_override(self, config: Config) -> None:
        result = config.with_overrides(port=9000)

        assert result.server.host == "127.0.0.1"
        assert result.server.port == 9000

    def test__overrides_source_dir(self, config: Config, tmp_path: Path) -> None:
        result = config.with_overrides(source_dir=tmp_path)

        assert result.docs.source_dir == tmp_path
        assert config.docs.source_dir == Path("docs")
        assert result.tree is config.tree

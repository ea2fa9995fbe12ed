"""
Tests for configuration module.
"""

import pytest
import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mdcover.core.config import (
    PROJECT_NAME,
    PROJECT_VERSION,
    MUSICBRAINZ_CONFIG,
    SERVER_CONFIG,
    MusicBrainzConfig,
    ServerConfig,
    as_dict,
    parse_port,
)
from mdcover.core.exceptions import ConfigurationError


def test_project_info():
    """Test project information constants."""
    assert PROJECT_NAME == "mdcover"
    assert PROJECT_VERSION == "1.0.0"


def test_musicbrainz_config():
    """Test MusicBrainz configuration."""
    assert MUSICBRAINZ_CONFIG["BASE_URL"] == "https://musicbrainz.org/ws/2"
    assert MUSICBRAINZ_CONFIG["USER_AGENT"]
    assert MUSICBRAINZ_CONFIG["TIMEOUT"] == 10


def test_musicbrainz_config_from_dict_strips_trailing_slash():
    """Test that the base URL is normalised."""
    config = MusicBrainzConfig.from_dict({
        "BASE_URL": "http://localhost:5000/ws/2/",
        "USER_AGENT": "test/0.1",
        "TIMEOUT": 2,
    })
    
    assert config.base_url == "http://localhost:5000/ws/2"
    assert config.user_agent == "test/0.1"
    assert config.timeout == 2


def test_musicbrainz_config_is_immutable():
    """Test that config values cannot be changed after construction."""
    config = MusicBrainzConfig()
    
    with pytest.raises(FrozenInstanceError):
        config.timeout = 60


class TestServerConfig:
    """Tests for ServerConfig and PORT parsing."""
    
    def test_default_port_when_unset(self):
        """Test that a missing PORT means 8080."""
        assert ServerConfig.from_env({}).port == 8080
    
    def test_default_port_when_empty(self):
        """Test that an empty PORT means 8080."""
        assert ServerConfig.from_env({"PORT": ""}).port == 8080
    
    def test_port_from_environment(self):
        """Test that PORT selects the listening port."""
        config = ServerConfig.from_env({"PORT": "9000"})
        
        assert config.port == 9000
        assert config.host == SERVER_CONFIG["HOST"]
        assert config.static_dir == Path(SERVER_CONFIG["STATIC_DIR"])
    
    def test_port_read_from_os_environ(self, monkeypatch):
        """Test that os.environ is used by default."""
        monkeypatch.setenv("PORT", "8181")
        
        assert ServerConfig.from_env().port == 8181
    
    @pytest.mark.parametrize("value", ["http", "80.5", "0", "70000", "-1"])
    def test_invalid_port(self, value):
        """Test that unusable PORT values are rejected."""
        with pytest.raises(ConfigurationError):
            parse_port(value)


def test_as_dict():
    """Test the plain-dict view of a config value."""
    assert as_dict(ServerConfig(port=1234)) == {
        "host": SERVER_CONFIG["HOST"],
        "port": 1234,
        "static_dir": Path(SERVER_CONFIG["STATIC_DIR"]),
    }

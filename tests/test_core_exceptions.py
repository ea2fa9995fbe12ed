"""
Tests for custom exceptions.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mdcover.core.exceptions import (
    MdCoverError,
    ValidationError,
    ConfigurationError,
    APIError,
    UpstreamUnreachable,
    UpstreamError,
    UpstreamMalformedResponse
)


class TestExceptions:
    """Tests for custom exception classes."""
    
    def test_mdcover_error_is_exception(self):
        """Test that MdCoverError is an Exception."""
        assert issubclass(MdCoverError, Exception)
    
    def test_validation_error_is_value_error(self):
        """Test that ValidationError is both an MdCoverError and a ValueError."""
        assert issubclass(ValidationError, MdCoverError)
        assert issubclass(ValidationError, ValueError)
    
    def test_configuration_error_is_not_api_error(self):
        """Test that ConfigurationError sits outside the upstream branch."""
        assert issubclass(ConfigurationError, MdCoverError)
        assert not issubclass(ConfigurationError, APIError)
    
    @pytest.mark.parametrize("exc_type", [UpstreamUnreachable, UpstreamError, UpstreamMalformedResponse])
    def test_upstream_errors_inherit_from_api_error(self, exc_type):
        """Test that every upstream failure can be caught as APIError."""
        assert issubclass(exc_type, APIError)
    
    def test_upstream_unreachable_is_connection_error(self):
        """Test that UpstreamUnreachable is a ConnectionError."""
        with pytest.raises(ConnectionError):
            raise UpstreamUnreachable("connection refused")
    
    def test_upstream_error_carries_status(self):
        """Test that UpstreamError keeps status code and reason."""
        error = UpstreamError(503, "Service Unavailable")
        
        assert error.status_code == 503
        assert error.reason == "Service Unavailable"
        assert str(error) == "musicbrainz api error: 503 Service Unavailable"
    
    def test_upstream_error_without_reason(self):
        """Test UpstreamError message when no reason phrase is given."""
        error = UpstreamError(418)
        
        assert error.reason == ""
        assert str(error) == "musicbrainz api error: 418"

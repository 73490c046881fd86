"""
Tests unitaires pour les Exceptions du domaine.
"""


from src.domain.exceptions import (
    ConfigurationError,
    DeliveryError,
    DomainException,
)


class TestDomainException:
    """Tests pour DomainException."""

    def test_create_with_message_only(self):
        """Test creation avec message seul."""
        exc = DomainException("Test error")
        assert exc.message == "Test error"
        assert exc.code == "DomainException"

    def test_create_with_code(self):
        """Test creation avec code."""
        exc = DomainException("Test error", code="TEST_CODE")
        assert exc.code == "TEST_CODE"

    def test_str_representation(self):
        """Test representation string."""
        exc = DomainException("Test error", code="TEST")
        assert str(exc) == "[TEST] Test error"


class TestConfigurationError:
    """Tests pour ConfigurationError."""

    def test_create(self):
        """Test creation."""
        exc = ConfigurationError()
        assert exc.code == "EMAIL_NOT_CONFIGURED"
        assert "not configured" in str(exc)
        assert exc.reason is None

    def test_create_with_reason(self):
        """Test creation avec raison."""
        exc = ConfigurationError("missing EMAIL_USER")
        assert exc.reason == "missing EMAIL_USER"
        assert "missing EMAIL_USER" in str(exc)

    def test_is_domain_exception(self):
        """Herite de DomainException."""
        assert isinstance(ConfigurationError(), DomainException)


class TestDeliveryError:
    """Tests pour DeliveryError."""

    def test_create(self):
        """Test creation."""
        exc = DeliveryError("535 Authentication failed")
        assert exc.detail == "535 Authentication failed"
        assert exc.code == "EMAIL_DELIVERY_FAILED"
        assert "Failed to send password reset email" in str(exc)
        assert "535 Authentication failed" in str(exc)

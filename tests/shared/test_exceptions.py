"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    AuthenticationError,
    ConflictError,
    ExternalServiceError,
    GatehouseError,
    NotFoundError,
    ValidationError,
)


class TestGatehouseError:
    def test_message(self):
        error = GatehouseError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code_is_class_name(self):
        assert GatehouseError("Test error").code == "GatehouseError"
        assert NotFoundError("missing").code == "NotFoundError"

    def test_custom_code_and_details(self):
        error = GatehouseError("Test error", code="CUSTOM_ERROR", details={"key": "value"})
        assert error.code == "CUSTOM_ERROR"
        assert error.details == {"key": "value"}

    def test_to_dict(self):
        result = GatehouseError("Test error", code="TEST_ERROR", details={"key": "value"}).to_dict()

        assert result == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }

    def test_to_dict_minimal(self):
        result = GatehouseError("Test error").to_dict()
        assert result["details"] == {}


class TestHierarchy:
    def test_subclasses_inherit_gatehouse_error(self):
        for cls in (NotFoundError, ConflictError, ValidationError, AuthenticationError):
            assert isinstance(cls("x"), GatehouseError)


class TestExternalServiceError:
    def test_stores_service(self):
        error = ExternalServiceError("Connection failed", service="supabase")
        assert error.service == "supabase"
        assert error.to_dict()["details"]["service"] == "supabase"

    def test_preserves_other_details(self):
        error = ExternalServiceError(
            "Connection failed",
            service="supabase",
            details={"status_code": 500},
        )
        result = error.to_dict()

        assert result["details"]["service"] == "supabase"
        assert result["details"]["status_code"] == 500


class TestStatusCodes:
    def test_each_class_maps_to_an_http_status(self):
        assert GatehouseError("x").status_code == 500
        assert NotFoundError("x").status_code == 404
        assert ConflictError("x").status_code == 409
        assert ValidationError("x").status_code == 400
        assert AuthenticationError("x").status_code == 401
        assert ExternalServiceError("x", service="supabase").status_code == 503

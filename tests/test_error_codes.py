"""Tests for the structured error code taxonomy."""

from charging_api.exceptions import (
    ConfigurationError,
    DataSetValidationError,
    EmptyDataSetError,
    InvalidViewError,
    NotFoundError,
)
from charging_api.utils.error_codes import (
    ERROR_METADATA,
    ErrorCategory,
    ErrorCode,
    StructuredError,
    error_code_for,
    get_error_metadata,
    http_status_for,
)


class TestErrorCodeMapping:
    def test_codes(self):
        assert error_code_for(InvalidViewError("x")) is ErrorCode.E001_INVALID_VIEW
        assert error_code_for(NotFoundError("x")) is ErrorCode.E002_RECORD_NOT_FOUND
        assert error_code_for(DataSetValidationError("x")) is ErrorCode.E003_INVALID_DATASET
        assert error_code_for(EmptyDataSetError()) is ErrorCode.E400_EMPTY_DATASET
        assert error_code_for(ConfigurationError("x")) is ErrorCode.E501_CONFIGURATION_ERROR

    def test_unknown_exception(self):
        assert error_code_for(ValueError("x")) is ErrorCode.E500_INTERNAL_SERVER_ERROR

    def test_http_status(self):
        assert http_status_for(InvalidViewError("x")) == 400
        assert http_status_for(NotFoundError("x")) == 404
        assert http_status_for(EmptyDataSetError()) == 500
        assert http_status_for(KeyError("x")) == 500

    def test_every_code_has_metadata(self):
        assert set(ERROR_METADATA) == set(ErrorCode)

    def test_http_layer_codes(self):
        assert get_error_metadata(ErrorCode.E005_METHOD_NOT_ALLOWED)["http_status"] == 405
        assert get_error_metadata(ErrorCode.E006_BAD_REQUEST)["category"] is ErrorCategory.VALIDATION


class TestGetErrorMetadata:
    def test_known(self):
        metadata = get_error_metadata(ErrorCode.E001_INVALID_VIEW)
        assert metadata["category"] is ErrorCategory.VALIDATION
        assert metadata["alert"] is False

    def test_unknown_defaults_to_system(self):
        metadata = get_error_metadata("E999")
        assert metadata["category"] is ErrorCategory.SYSTEM
        assert metadata["http_status"] == 500


class TestStructuredError:
    def test_from_exception_carries_details(self):
        error = StructuredError.from_exception(NotFoundError("2099-01-01", "daily"), request_id="r1")

        assert error.code is ErrorCode.E002_RECORD_NOT_FOUND
        assert error.message == "No data found for 2099-01-01"
        assert error.context == {"identifier": "2099-01-01", "view": "daily", "request_id": "r1"}
        assert isinstance(error.exception, NotFoundError)

    def test_from_plain_exception(self):
        error = StructuredError.from_exception(RuntimeError("boom"))
        assert error.code is ErrorCode.E500_INTERNAL_SERVER_ERROR
        assert error.message == "boom"

    def test_str(self):
        assert str(StructuredError(ErrorCode.E001_INVALID_VIEW, "bad view")) == "[E001] bad view"

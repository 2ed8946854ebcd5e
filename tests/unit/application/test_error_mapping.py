"""Tests for mapping Sampurnan errors to HTTP responses."""

from sampurnan.application.api.v1.errors import map_error
from sampurnan.application.api.v1.routes.admin_manuscripts import _sanitize_header_filename
from sampurnan.domain.shared.error import (
    AuthorizationError,
    ConfigurationError,
    ExternalServiceError,
    FormatError,
    InvalidStateError,
    NotFoundError,
    StoreError,
    ValidationError,
)


class TestMapError:
    def test_not_found(self):
        exc = map_error(NotFoundError("Manuscript not found: 42"))
        assert exc.status_code == 404
        assert exc.detail == {"code": "NotFoundError", "message": "Manuscript not found: 42"}

    def test_validation_error_names_the_field(self):
        exc = map_error(ValidationError("title must not be empty.", field="title"))
        assert exc.status_code == 422
        assert exc.detail["field"] == "title"
        assert exc.detail["code"] == "VALIDATION_ERROR"

    def test_format_error(self):
        assert map_error(FormatError("File contains no data rows.")).status_code == 422

    def test_unconfirmed_delete_is_a_conflict(self):
        exc = map_error(InvalidStateError("Deleting requires confirmation", code="confirmation_required"))
        assert exc.status_code == 409
        assert exc.detail["code"] == "confirmation_required"

    def test_authorization_challenges_for_bearer(self):
        exc = map_error(AuthorizationError("Admin session required", code="missing_session"))
        assert exc.status_code == 401
        assert exc.headers == {"WWW-Authenticate": "Bearer"}

    def test_infrastructure_errors_are_unavailable(self):
        for error in (StoreError("disk full"), ExternalServiceError("quota"), ConfigurationError("no key")):
            assert map_error(error).status_code == 503


class TestSanitizeHeaderFilename:
    def test_normal_filename_unchanged(self):
        assert _sanitize_header_filename("manuscript_import_template.xlsx") == "manuscript_import_template.xlsx"

    def test_strips_crlf_and_quotes(self):
        assert _sanitize_header_filename('a"b\r\nc.csv') == "a_b__c.csv"

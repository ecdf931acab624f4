import logging

from ewaste_api.services.error_handler import (
    ErrorCategory,
    ErrorHandlerService,
    ErrorSeverity,
    InvalidTransition,
)


def test_handle_error_logs_and_reports_context(caplog):
    service = ErrorHandlerService()
    context = {"method": "PUT", "url": "http://testserver/api/request/1", "client_ip": "10.0.0.5"}

    with caplog.at_level(logging.WARNING, logger="ewaste_api.services.error_handler"):
        report = service.handle_error(
            error=InvalidTransition("Request has already been Approved"),
            category=ErrorCategory.CONFLICT,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            operation="PUT /api/request/1",
        )

    assert report["context"] == context
    assert report["category"] == "conflict"
    assert report["error_id"].startswith("conflict_")
    assert "10.0.0.5" in caplog.text
    assert report["error_id"] in caplog.text

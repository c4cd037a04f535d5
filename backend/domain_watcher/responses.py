from __future__ import annotations

from typing import Tuple

from .models import BatchReport, CheckResponse, ErrorResponse

CHECK_COMPLETED = "Domain check completed"


def build_check_response(report: BatchReport) -> Tuple[int, CheckResponse]:
    status = "error" if report.has_errors else "success"
    body = CheckResponse(status=status, results=report.results, message=CHECK_COMPLETED)
    return (500 if report.has_errors else 200), body


def build_error_response(message: str) -> Tuple[int, ErrorResponse]:
    return 500, ErrorResponse(error=message or "Unknown error")

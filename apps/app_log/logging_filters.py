# apps/app_log/logging_filters.py
from __future__ import annotations
import logging
from .utils import get_current_request


class RequestContextFilter(logging.Filter):
    """
    Añade campos al record para usarlos en formatters/handlers:
    %(request_id)s %(region_code)s %(method)s %(path)s

    Fuera de un request (tests, comandos) quedan en '-'.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        req = get_current_request()
        # Defaults (respetando extras ya adjuntados al record)
        record.request_id = getattr(record, "request_id", "-")
        record.region_code = getattr(record, "region_code", "-")
        record.method = getattr(record, "method", "-")
        record.path = getattr(record, "path", "-")

        if req is not None:
            record.request_id = str(getattr(req, "request_id", "-") or "-")
            record.region_code = getattr(req, "region_code", "") or "-"
            record.method = getattr(req, "method", "-") or "-"
            record.path = getattr(req, "path", "-") or "-"

        return True

# apps/app_log/middleware.py
"""
Middleware de observabilidad:

- RequestIDMiddleware: asigna un request_id único (o respeta el X-Request-ID
  entrante), lo deja disponible para los logs vía thread-local y lo expone
  en el header X-Request-ID de la respuesta.
"""
from django.utils.deprecation import MiddlewareMixin

from .utils import set_current_request, ensure_request_id, REQUEST_ID_HEADER


class RequestIDMiddleware(MiddlewareMixin):
    def process_request(self, request):
        set_current_request(request)
        ensure_request_id(request)

    def process_response(self, request, response):
        rid = getattr(request, "request_id", None)
        if rid:
            response[REQUEST_ID_HEADER] = str(rid)
        set_current_request(None)
        return response

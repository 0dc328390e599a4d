from __future__ import annotations

import time
import logging

logger = logging.getLogger("request")


class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start = time.time()
        path = request.path
        method = request.method
        status_code = None
        try:
            response = self.get_response(request)
            status_code = response.status_code
            return response
        finally:
            duration = int((time.time() - start) * 1000)
            user = getattr(request, 'user', None)
            user_id = getattr(user, 'id', None)
            logger.info(
                "%s %s -> %s (%sms)", method, path, status_code, duration,
                extra={
                    "method": method,
                    "path": path,
                    "userId": str(user_id) if user_id else None,
                    "status": status_code,
                    "durationMs": duration,
                },
            )

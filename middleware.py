import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from services.observability import REQUEST_ID_HEADER, bind_request_id, release_request_id

logger = logging.getLogger("listenport.http")


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        req_id, token = bind_request_id(request.headers.get(REQUEST_ID_HEADER))
        start = time.time()

        # attach to request state
        request.state.request_id = req_id

        response = None
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = req_id
            return response
        finally:
            duration_ms = int((time.time() - start) * 1000)
            status = getattr(response, "status_code", 500)

            logger.info(
                "http_request_end method=%s path=%s status=%s duration_ms=%s request_id=%s",
                request.method,
                request.url.path,
                status,
                duration_ms,
                req_id,
            )
            release_request_id(token)

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from contextvars import ContextVar

import logging
import time
import uuid

# Define the ContextVar to store the request ID
request_id_context: ContextVar[str] = ContextVar("request_id", default="N/A")

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags every request with a short id for log correlation and times the tool calls."""

    @classmethod
    def request_id_context(cls):
        return request_id_context

    async def dispatch(self, request: Request, call_next):
        # Honour an id forwarded by the orchestration platform, else generate one
        new_request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        token = request_id_context.set(new_request_id)

        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = new_request_id

            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)

        except Exception:
            logger.exception("Unhandled error during %s %s.", request.method, request.url.path)
            raise

        finally:
            # Reset the context variable when the request is done
            request_id_context.reset(token)

        return response

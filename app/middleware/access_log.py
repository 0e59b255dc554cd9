"""
Access log middleware writing one Apache combined-format line per request
"""

import logging
from datetime import datetime, timezone
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("access")


def format_combined(request: Request, status_code: int, content_length: str) -> str:
    client = request.client.host if request.client else "-"
    timestamp = datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S %z")
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    referer = request.headers.get("referer", "-")
    user_agent = request.headers.get("user-agent", "-")
    return (
        f'{client} - - [{timestamp}] "{request.method} {target} HTTP/{http_version}" '
        f'{status_code} {content_length} "{referer}" "{user_agent}"'
    )


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            # The catch-all handler sits outside this middleware and answers 500
            logger.info(format_combined(request, 500, "-"))
            raise

        logger.info(format_combined(request, response.status_code, response.headers.get("content-length", "-")))
        return response

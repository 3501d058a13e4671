"""
Custom middleware for the FastAPI application
"""
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all requests and responses"""
    async def dispatch(self, request: Request, call_next):
        logger.info(f"REQUEST: {request.method} {request.url.path}")
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"ERROR in request: {type(e).__name__}: {str(e)}")
            raise
        logger.info(f"RESPONSE: {response.status_code}")
        return response

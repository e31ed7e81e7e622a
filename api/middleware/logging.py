"""
Logging middleware
"""
import time
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from utils.id_generator import generate_invocation_id
from utils.logger import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

class LoggingMiddleware(BaseHTTPMiddleware):
    """Request logging middleware"""
    
    async def dispatch(self, request: Request, call_next):
        # Keep the caller's id so webhook deliveries can be correlated
        request_id = request.headers.get(REQUEST_ID_HEADER) or generate_invocation_id()
        start_time = time.time()
        
        logger.info(
            "Request started",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent")
        )
        request.state.request_id = request_id
        
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed",
                error=exc,
                request_id=request_id,
                process_time=f"{time.time() - start_time:.3f}s"
            )
            raise
        
        logger.info(
            "Request completed",
            request_id=request_id,
            status_code=response.status_code,
            process_time=f"{time.time() - start_time:.3f}s"
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

def add_logging_middleware(app: FastAPI):
    """Add logging middleware"""
    app.add_middleware(LoggingMiddleware)

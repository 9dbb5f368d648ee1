"""
Rate limiting for Papalote Market

Sliding one-minute windows kept in process memory:
- every request, keyed by bearer token or client IP (middleware)
- login and registration, keyed by path and client IP (dependency)
"""
import time
from collections import defaultdict, deque
from typing import Deque, Dict, NamedTuple, Tuple

from fastapi import HTTPException, Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from .config import settings


WINDOW_SECONDS = 60

# Never limited
EXEMPT_PATHS = {
    "/",
    "/health",
    "/docs",
    "/openapi.json",
    "/redoc",
}


class RateLimitResult(NamedTuple):
    allowed: bool
    remaining: int
    retry_after: int


class RateLimiter:
    """
    Request timestamps per client, trimmed to the current window on each hit.

    Usage:
        result = rate_limiter.hit("ip:127.0.0.1", limit=10)
        if not result.allowed:
            ...
    """

    def __init__(self):
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)

    def hit(self, identifier: str, limit: int, window_seconds: int = WINDOW_SECONDS) -> RateLimitResult:
        """Record a request unless the client already used its whole window"""
        now = time.time()
        hits = self._hits[identifier]
        while hits and hits[0] <= now - window_seconds:
            hits.popleft()

        if len(hits) >= limit:
            retry_after = int(hits[0] + window_seconds - now) + 1
            return RateLimitResult(False, 0, retry_after)

        hits.append(now)
        return RateLimitResult(True, limit - len(hits), 0)

    def reset(self) -> None:
        """Forget every tracked client"""
        self._hits.clear()


rate_limiter = RateLimiter()


def get_client_ip(request: Request) -> str:
    """Client IP, taking the first hop of X-Forwarded-For when behind a proxy"""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def _limit_headers(limit: int, remaining: int) -> Dict[str, str]:
    return {"X-RateLimit-Limit": str(limit), "X-RateLimit-Remaining": str(remaining)}


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Per-client limit on every API request.

    Signed-in clients (bearer token) get RATE_LIMIT_AUTHENTICATED per minute,
    anonymous clients RATE_LIMIT_DEFAULT per IP. Responses carry
    X-RateLimit-Limit / X-RateLimit-Remaining, and Retry-After when limited.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        identifier, limit = self._client_key(request)
        result = rate_limiter.hit(identifier, limit)

        if not result.allowed:
            # Returned rather than raised so CORS headers are still added
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"success": False, "error": "Demasiadas solicitudes. Intenta de nuevo en un momento."},
                headers={**_limit_headers(limit, 0), "Retry-After": str(result.retry_after)},
            )

        response = await call_next(request)
        response.headers.update(_limit_headers(limit, result.remaining))
        return response

    @staticmethod
    def _client_key(request: Request) -> Tuple[str, int]:
        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            return f"token:{hash(auth_header)}", settings.RATE_LIMIT_AUTHENTICATED
        return f"ip:{get_client_ip(request)}", settings.RATE_LIMIT_DEFAULT


async def login_rate_limit(request: Request):
    """
    Dependency limiting credential endpoints per path and client IP.

    Usage:
        @router.post("/login")
        async def login(payload: LoginRequest, _: None = Depends(login_rate_limit)):
            ...
    """
    limit = settings.RATE_LIMIT_LOGIN
    result = rate_limiter.hit(f"credentials:{request.url.path}:{get_client_ip(request)}", limit)

    if not result.allowed:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Demasiados intentos. Intenta de nuevo en {result.retry_after} segundos.",
            headers={**_limit_headers(limit, 0), "Retry-After": str(result.retry_after)},
        )

"""Session-based route gate for page requests."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

LOGIN_PATH = "/login"
HOME_PATH = "/dashboard"

PUBLIC_PREFIXES = ("/login", "/signup", "/verify-email")
AUTH_PAGE_PREFIXES = ("/login", "/signup")
EXEMPT_PREFIXES = ("/api", "/health", "/docs", "/redoc", "/openapi.json", "/static", "/favicon.ico")


def resolve_redirect(path: str, has_session: bool) -> str | None:
    """Return the path to redirect to, or None to let the request through."""
    if not has_session and not path.startswith(PUBLIC_PREFIXES):
        return LOGIN_PATH
    if has_session and path.startswith(AUTH_PAGE_PREFIXES):
        return HOME_PATH
    if has_session and path == "/":
        return HOME_PATH
    return None


class AuthGateMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, session_cookie: str = "sb-access-token", exempt_prefixes=EXEMPT_PREFIXES):
        super().__init__(app)
        self.session_cookie = session_cookie
        self.exempt_prefixes = tuple(exempt_prefixes)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path.startswith(self.exempt_prefixes):
            return await call_next(request)

        has_session = bool(request.cookies.get(self.session_cookie))
        target = resolve_redirect(path, has_session)
        if target is not None:
            return RedirectResponse(url=str(request.url.replace(path=target, query="")), status_code=307)
        return await call_next(request)

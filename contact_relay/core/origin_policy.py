"""
Cross-origin access policy for the contact API.

One policy, two strengths:

- permissive: origins come from ALLOWED_ORIGINS (or the local dev origin) and
  Starlette's CORSMiddleware enforces them.
- strict: every request is checked against the static production origins plus
  ALLOWED_ORIGINS. Requests without an Origin header (curl, server-to-server,
  mobile apps) always pass. Anything else must match exactly after trailing
  slash normalization or the request is answered with 403.
"""

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from typing import Dict, List, Optional
import logging

from contact_relay.core.config import DEFAULT_DEV_ORIGIN, STATIC_ALLOWED_ORIGINS, Settings
from contact_relay.core.errors import ACCESS_DENIED, error_response
from contact_relay.core.exceptions import OriginDenied

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization", "X-Requested-With"]


def normalize_origin(origin: str) -> str:
    origin = origin.strip()
    return origin[:-1] if origin.endswith("/") else origin


class OriginPolicy:
    def __init__(self, settings: Settings, strict: Optional[bool] = None):
        self.settings = settings
        self.strict = settings.strict_mode if strict is None else strict

    def allowed_origins(self) -> List[str]:
        """Build the allow-list for the current request"""
        configured = self.settings.configured_origins
        if self.strict:
            return [*STATIC_ALLOWED_ORIGINS, *configured]
        return configured or [DEFAULT_DEV_ORIGIN]

    def is_allowed(self, origin: Optional[str]) -> bool:
        if not origin:
            return True
        return normalize_origin(origin) in self.allowed_origins()

    def check(self, origin: Optional[str]):
        """Raise OriginDenied unless the origin may talk to this API"""
        if not self.is_allowed(origin):
            raise OriginDenied(origin)

    def cors_headers(self, origin: Optional[str]) -> Dict[str, str]:
        return {
            "Access-Control-Allow-Origin": origin or "*",
            "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
            "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
            "Access-Control-Allow-Credentials": "true",
        }

    def install(self, app: FastAPI):
        if self.strict:
            app.add_middleware(StrictOriginMiddleware, policy=self)
        else:
            app.add_middleware(
                CORSMiddleware,
                allow_origins=self.allowed_origins(),
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )
        logger.info(
            f"Origin policy: {'strict' if self.strict else 'permissive'} "
            f"(allowed: {', '.join(self.allowed_origins())})"
        )


class StrictOriginMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: OriginPolicy):
        super().__init__(app)
        self.policy = policy

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        origin = request.headers.get("origin")
        logger.info(f"Request Origin: {origin}")

        try:
            self.policy.check(origin)
        except OriginDenied as e:
            logger.warning(f"❌ CORS denied: {e.origin} (allowed: {self.policy.allowed_origins()})")
            return error_response(status.HTTP_403_FORBIDDEN, ACCESS_DENIED)

        headers = self.policy.cors_headers(origin)

        # Preflight ends here once the headers are attached
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response

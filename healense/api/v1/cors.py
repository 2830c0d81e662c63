"""
Per-route CORS handling.

Each API route has its own method allow-list and credentials flag. Preflight
requests to a known route are answered here with 204; other requests pass
through and get the allow-origin headers added to their response.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

# External package imports
from starlette.datastructures import MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send


ALLOW_HEADERS = "Content-Type, Authorization"
MAX_AGE = "86400"


@dataclass(frozen=True)
class CorsPolicy:
    methods: Tuple[str, ...]
    allow_credentials: bool = True

    @property
    def allow_methods(self) -> str:
        return ", ".join(self.methods + ("OPTIONS",))


CORS_POLICIES: Dict[str, CorsPolicy] = {
    "/api/register": CorsPolicy(methods=("POST",), allow_credentials=False),
    "/api/session": CorsPolicy(methods=("POST", "PUT", "DELETE")),
    "/api/room": CorsPolicy(methods=("GET", "POST")),
    "/api/rooms": CorsPolicy(methods=("GET",)),
    "/api/image": CorsPolicy(methods=("POST",)),
    "/api/message": CorsPolicy(methods=("GET", "POST")),
    "/api/messages": CorsPolicy(methods=("GET",)),
}


class RouteCorsMiddleware:
    """Pure ASGI middleware applying CORS_POLICIES"""

    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str,
        policies: Mapping[str, CorsPolicy] = CORS_POLICIES,
    ) -> None:
        self.app = app
        self.allow_origin = allow_origin
        self.policies = policies

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        policy = self.policies.get(scope["path"].rstrip("/") or "/")
        if policy is None:
            await self.app(scope, receive, send)
            return

        if scope["method"] == "OPTIONS":
            response = Response(status_code=204, headers=self.preflight_headers(policy))
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                headers.update(self.simple_headers(policy))
                headers.add_vary_header("Origin")
            await send(message)

        await self.app(scope, receive, send_with_cors)

    def simple_headers(self, policy: CorsPolicy) -> Dict[str, str]:
        headers = {"Access-Control-Allow-Origin": self.allow_origin}
        if policy.allow_credentials:
            headers["Access-Control-Allow-Credentials"] = "true"
        return headers

    def preflight_headers(self, policy: CorsPolicy) -> Dict[str, str]:
        headers = self.simple_headers(policy)
        headers.update({
            "Access-Control-Allow-Methods": policy.allow_methods,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
            "Access-Control-Max-Age": MAX_AGE,
            "Vary": "Origin",
        })
        return headers

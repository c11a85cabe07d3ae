"""Custom middleware helpers for the storefront backend."""

from __future__ import annotations

from typing import Callable


class JWTCSRFBypassMiddleware:
    """Skip CSRF enforcement for stateless JWT authenticated requests.

    Sessions are issued by the external identity layer and reach this API as
    Authorization headers (JWT Bearer tokens). Requests carrying a bearer token
    never depend on cookies, so ``CsrfViewMiddleware`` is told to skip them while
    any session-based endpoint (the admin) keeps its CSRF protection.
    """

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request):
        authorization = request.META.get("HTTP_AUTHORIZATION", "")
        if authorization.lower().startswith("bearer "):
            request._dont_enforce_csrf_checks = True  # type: ignore[attr-defined]
            request.META.setdefault("CSRF_SKIP_REASON", "jwt-bearer")
        return self.get_response(request)

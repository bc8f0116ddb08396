from __future__ import annotations

import uuid

from fastapi import Request, Response

from services.theme_service import CLIENT_HINT_HEADER, ThemeManager, theme_manager_for

CLIENT_COOKIE = "portfolio-client"
CLIENT_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def resolve_client_id(request: Request) -> str:
    """Besökarens id från cookie, eller ett nytt om det saknas eller ser konstigt ut."""
    raw = request.cookies.get(CLIENT_COOKIE)
    if raw:
        try:
            return uuid.UUID(raw).hex
        except ValueError:
            pass
    return uuid.uuid4().hex


def remember_client(response: Response, client_id: str) -> None:
    response.set_cookie(CLIENT_COOKIE, client_id, max_age=CLIENT_COOKIE_MAX_AGE, httponly=True, samesite="lax")
    response.headers["Accept-CH"] = CLIENT_HINT_HEADER
    response.headers["Vary"] = CLIENT_HINT_HEADER


def theme_manager_for_request(request: Request) -> tuple[str, ThemeManager]:
    client_id = resolve_client_id(request)
    return client_id, theme_manager_for(client_id, request.headers.get(CLIENT_HINT_HEADER))


__all__ = ["CLIENT_COOKIE", "remember_client", "resolve_client_id", "theme_manager_for_request"]

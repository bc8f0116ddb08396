from __future__ import annotations

from fastapi import APIRouter, Request, Response

from models.theme import SystemPreference, Theme, ThemeState
from services.client_service import remember_client, theme_manager_for_request

router = APIRouter()


@router.get("/theme", response_model=ThemeState)
def get_theme(request: Request, response: Response) -> ThemeState:
    client_id, theme_manager = theme_manager_for_request(request)
    remember_client(response, client_id)
    return theme_manager.state()


@router.post("/theme/toggle", response_model=ThemeState)
def toggle_theme(request: Request, response: Response) -> ThemeState:
    """Växla tema och spara valet som manuellt."""
    client_id, theme_manager = theme_manager_for_request(request)
    theme_manager.toggle()
    remember_client(response, client_id)
    return theme_manager.state()


@router.post("/theme/system", response_model=ThemeState)
def system_theme_changed(preference: SystemPreference, request: Request, response: Response) -> ThemeState:
    """Systemets färgschema ändrades. Ignoreras om besökaren valt tema själv."""
    client_id, theme_manager = theme_manager_for_request(request)
    theme_manager.on_system_change(preference.prefers_dark)
    remember_client(response, client_id)
    return theme_manager.state()


@router.post("/theme/reset", response_model=ThemeState)
def reset_theme(request: Request, response: Response, preference: SystemPreference | None = None) -> ThemeState:
    """Glöm det manuella valet och följ systemet igen."""
    client_id, theme_manager = theme_manager_for_request(request)
    if preference is not None:
        theme_manager.reset(Theme.DARK if preference.prefers_dark else Theme.LIGHT)
    else:
        theme_manager.reset()
    remember_client(response, client_id)
    return theme_manager.state()

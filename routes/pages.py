from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from core.config import settings
from core.errors import CVUnavailableError, PortfolioLoadError
from services.client_service import remember_client, theme_manager_for_request
from services.cv_service import CVFile, cv_service
from services.navigation import HEADER_SCROLL_THRESHOLD, SCROLL_ACTIVATION_MARGIN, initial_navigation
from services.portfolio_service import portfolio_service
from services.render_service import SectionRenderer

router = APIRouter()
templates = Jinja2Templates(directory=str(settings.template_dir))
section_renderer = SectionRenderer(templates.env)

LOAD_ERROR_MESSAGE = "Failed to load portfolio data. Please try again later."


def _safe_next(target: str | None) -> str:
    if not target or not target.startswith("/") or target.startswith("//"):
        return "/"
    return target


def _cv_response(cv_file: CVFile) -> Response:
    return Response(
        content=cv_file.content,
        media_type=cv_file.media_type,
        headers={"Content-Disposition": cv_file.content_disposition},
    )


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    """Portfoliosidan, eller felpanelen om innehållet inte gick att ladda."""
    client_id, theme_manager = theme_manager_for_request(request)
    nav_links, header = initial_navigation()
    context = {
        "title": "Portfolio",
        "theme": theme_manager.state(),
        "nav_links": nav_links,
        "header": header,
        "scroll_margin": SCROLL_ACTIVATION_MARGIN,
        "header_threshold": HEADER_SCROLL_THRESHOLD,
        "current_year": date.today().year,
    }
    try:
        data = portfolio_service.load_data()
    except PortfolioLoadError:
        context["error_message"] = LOAD_ERROR_MESSAGE
        response = templates.TemplateResponse(request, "error.html", context, status_code=503)
    else:
        context["title"] = f"{data.personal.name} - {data.personal.title}" if data.personal.name else "Portfolio"
        context["sections"] = section_renderer.populate_content(data)
        response = templates.TemplateResponse(request, "index.html", context)
    remember_client(response, client_id)
    return response


@router.post("/theme/toggle")
def toggle_theme_form(request: Request, next: str | None = Form(None)):
    """Växla tema utan JavaScript och skicka tillbaka besökaren."""
    client_id, theme_manager = theme_manager_for_request(request)
    theme_manager.toggle()
    response = RedirectResponse(url=_safe_next(next), status_code=303)
    remember_client(response, client_id)
    return response


@router.get("/cv/download")
def download_cv():
    """PDF om den finns, annars ett genererat text-CV."""
    try:
        cv_file = cv_service.download_cv()
    except CVUnavailableError as exc:
        raise HTTPException(status_code=503, detail=exc.message)
    return _cv_response(cv_file)


@router.get("/cv/text")
def download_text_cv():
    try:
        cv_file = cv_service.download_text_cv()
    except CVUnavailableError as exc:
        raise HTTPException(status_code=503, detail=exc.message)
    return _cv_response(cv_file)

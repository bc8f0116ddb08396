from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import httpx

from core.config import settings
from core.errors import CVUnavailableError, PortfolioLoadError, ResourceError
from models.portfolio import PortfolioData
from services.portfolio_service import PortfolioService, portfolio_service
from services.resource_loader import fetch_resource

logger = logging.getLogger(__name__)

CV_UNAVAILABLE_MESSAGE = "CV download is currently unavailable. Please contact me directly."
CV_FOOTER = "This CV was generated from portfolio data. For a formatted version, please contact me directly."


@dataclass(frozen=True)
class CVFile:
    filename: str
    content: bytes
    media_type: str

    @property
    def content_disposition(self) -> str:
        ascii_name = self.filename.encode("ascii", "ignore").decode() or "CV"
        return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(self.filename)}"


def cv_filename(data: Optional[PortfolioData], extension: str) -> str:
    name = data.personal.name if data and data.personal.name else "Portfolio"
    return f"{name}_CV.{extension}"


def generate_cv_content(data: PortfolioData) -> str:
    """Bygg ett CV i ren text ur innehållsdokumentet."""
    personal, about, contact = data.personal, data.about, data.contact
    contact_lines = "\n".join(f"{link.label}: {link.url}" for link in contact.links)
    about_text = "\n\n".join(about.description)
    skill_lines = "\n".join(f"• {skill.name} ({skill.level})" for skill in data.skills)
    experience_text = "\n\n".join(
        f"{exp.position} at {exp.company} ({exp.period})\n    {exp.description}" for exp in data.experience
    )
    return (
        f"{personal.name} - CV\n"
        f"{personal.title}\n"
        "\n"
        "Contact Information:\n"
        f"{contact_lines}\n"
        "\n"
        "About:\n"
        f"{about_text}\n"
        "\n"
        "Skills:\n"
        f"{skill_lines}\n"
        "\n"
        "Experience:\n"
        f"{experience_text}\n"
        "\n"
        f"{CV_FOOTER}"
    )


class CVService:
    """CV-nedladdning: PDF i första hand, genererad text som reserv."""

    def __init__(
        self,
        portfolio: PortfolioService | None = None,
        source: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.portfolio = portfolio or portfolio_service
        self._source = source
        self.transport = transport

    @property
    def source(self) -> str:
        return self._source or settings.cv_source

    def download_cv(self, data: PortfolioData | None = None) -> CVFile:
        try:
            content = fetch_resource(self.source, transport=self.transport)
        except ResourceError as exc:
            logger.warning("Error downloading CV, falling back to text: %s", exc)
            return self.download_text_cv(data)
        if data is None:
            data = self._try_load()
        return CVFile(cv_filename(data, "pdf"), content, "application/pdf")

    def download_text_cv(self, data: PortfolioData | None = None) -> CVFile:
        try:
            if data is None:
                data = self.portfolio.load_data()
            text = generate_cv_content(data)
        except (PortfolioLoadError, AttributeError, TypeError) as exc:
            logger.error("Error generating CV: %s", exc)
            raise CVUnavailableError(CV_UNAVAILABLE_MESSAGE) from exc
        return CVFile(cv_filename(data, "txt"), text.encode("utf-8"), "text/plain; charset=utf-8")

    def _try_load(self) -> Optional[PortfolioData]:
        # Namnet behövs bara till filnamnet
        try:
            return self.portfolio.load_data()
        except PortfolioLoadError:
            return None


cv_service = CVService()

__all__ = ["CVFile", "CVService", "CV_UNAVAILABLE_MESSAGE", "cv_filename", "cv_service", "generate_cv_content"]

from __future__ import annotations

import json
import logging

import httpx
from pydantic import ValidationError

from core.config import settings
from core.errors import PortfolioLoadError, ResourceError
from models.portfolio import PortfolioData
from services.resource_loader import fetch_resource

logger = logging.getLogger(__name__)


class PortfolioService:
    """Läser innehållsdokumentet från fil eller URL."""

    def __init__(self, source: str | None = None, transport: httpx.BaseTransport | None = None) -> None:
        self._source = source
        self.transport = transport

    @property
    def source(self) -> str:
        return self._source or settings.portfolio_source

    def load_data(self) -> PortfolioData:
        """Hämta och tolka dokumentet. Alla fel blir PortfolioLoadError."""
        try:
            raw = fetch_resource(self.source, transport=self.transport)
            payload = json.loads(raw)
            return PortfolioData.model_validate(payload)
        except ResourceError as exc:
            logger.error("Error loading portfolio data: %s", exc)
            raise PortfolioLoadError(exc.message) from exc
        except (ValueError, ValidationError) as exc:
            # json.JSONDecodeError och UnicodeDecodeError är båda ValueError
            logger.error("Error parsing portfolio data from %s: %s", self.source, exc)
            raise PortfolioLoadError(f"Invalid portfolio data: {exc}") from exc


portfolio_service = PortfolioService()

__all__ = ["PortfolioService", "portfolio_service"]

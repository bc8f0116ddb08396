"""Feltyper för portfoliosidan."""

from __future__ import annotations


class PortfolioError(Exception):
    """Basklass för fel i portfoliosidan."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ResourceError(PortfolioError):
    """En resurs (fil eller URL) kunde inte hämtas."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class PortfolioLoadError(PortfolioError):
    """Innehållsdokumentet kunde inte hämtas eller tolkas."""


class CVUnavailableError(PortfolioError):
    """Varken PDF eller genererat textsvar gick att ta fram."""


__all__ = ["PortfolioError", "ResourceError", "PortfolioLoadError", "CVUnavailableError"]

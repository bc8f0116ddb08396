"""Datamodeller för portfolioinnehåll och tema."""

from models.portfolio import PortfolioData  # noqa: F401
from models.theme import Theme, ThemeState  # noqa: F401

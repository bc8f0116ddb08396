from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from jinja2 import Environment
from markupsafe import Markup

from core.config import settings
from models.portfolio import PortfolioData
from services import view_models
from services.resource_loader import is_remote

logger = logging.getLogger(__name__)

SECTION_ORDER: Tuple[str, ...] = ("hero", "about", "skills", "experience", "projects", "contact")


class SectionRenderer:
    """Renderar de sex sektionerna till HTML-fragment, i fast ordning.

    Varje delrendering bygger först en vy-modell och skriver sedan in den
    i sin mall. Ett fel i en sektion avbryter resten.
    """

    def __init__(self, env: Environment, static_dir: Path | None = None, profile_image: str | None = None) -> None:
        self.env = env
        self.static_dir = static_dir or settings.static_dir
        self.profile_image = profile_image if profile_image is not None else settings.profile_image
        self._builders: Dict[str, Callable[[PortfolioData], object]] = {
            "hero": self._hero,
            "about": view_models.about_view,
            "skills": view_models.skills_view,
            "experience": view_models.experience_view,
            "projects": view_models.projects_view,
            "contact": view_models.contact_view,
        }

    def populate_content(self, data: Optional[PortfolioData]) -> Dict[str, Markup]:
        if data is None:
            return {}
        return {name: self.render_section(name, data) for name in SECTION_ORDER}

    def render_section(self, name: str, data: PortfolioData) -> Markup:
        view = self._builders[name](data)
        template = self.env.get_template(f"sections/_{name}.html")
        logger.debug("Rendering section %s", name)
        return Markup(template.render(view=view))

    def _hero(self, data: PortfolioData) -> view_models.HeroView:
        image = self.profile_image
        if image and is_remote(image):
            return view_models.hero_view(data, image_url=image, image_available=True)
        available = view_models.profile_image_available(self.static_dir, image)
        return view_models.hero_view(data, image_url=f"/static/{image}" if image else None, image_available=available)


__all__ = ["SECTION_ORDER", "SectionRenderer"]

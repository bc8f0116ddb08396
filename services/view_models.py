"""Rena omvandlingar från innehållsdokumentet till vy-modeller.

Ingen av funktionerna rör mallar eller HTML; de kan testas direkt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from models.portfolio import PortfolioData


@dataclass(frozen=True)
class HeroView:
    name: str
    title: str
    description: str
    image_url: Optional[str]
    show_image: bool
    show_fallback: bool


@dataclass(frozen=True)
class StatView:
    value: str
    label: str


@dataclass(frozen=True)
class AboutView:
    paragraphs: List[str]
    stats: List[StatView]


@dataclass(frozen=True)
class SkillView:
    icon: str
    name: str
    level: str


@dataclass(frozen=True)
class ExperienceView:
    period: str
    position: str
    company: str
    description: str


@dataclass(frozen=True)
class ProjectLinkView:
    url: str
    icon: str
    label: str


@dataclass(frozen=True)
class ProjectView:
    icon: str
    title: str
    description: str
    technologies: List[str]
    links: List[ProjectLinkView] = field(default_factory=list)


@dataclass(frozen=True)
class ContactLinkView:
    url: str
    icon: str
    label: str


@dataclass(frozen=True)
class ContactView:
    description: str
    links: List[ContactLinkView]


def profile_image_available(static_dir: Path, image_path: Optional[str]) -> bool:
    """True om profilbilden finns som fil under static/."""
    if not image_path:
        return False
    return (static_dir / image_path).is_file()


def hero_view(data: PortfolioData, image_url: Optional[str] = None, image_available: bool = False) -> HeroView:
    personal = data.personal
    show_image = bool(image_url) and image_available
    return HeroView(
        name=personal.name,
        title=personal.title,
        description=personal.description,
        image_url=image_url if show_image else None,
        show_image=show_image,
        show_fallback=not show_image,
    )


def _stat_value(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def about_view(data: PortfolioData) -> AboutView:
    about = data.about
    return AboutView(
        paragraphs=list(about.description),
        stats=[StatView(_stat_value(stat.value), stat.label) for stat in about.stats],
    )


def skills_view(data: PortfolioData) -> List[SkillView]:
    return [SkillView(skill.icon, skill.name, skill.level) for skill in data.skills]


def experience_view(data: PortfolioData) -> List[ExperienceView]:
    return [ExperienceView(exp.period, exp.position, exp.company, exp.description) for exp in data.experience]


def projects_view(data: PortfolioData) -> List[ProjectView]:
    projects = []
    for project in data.projects:
        links = []
        # Länkar som saknas hoppas över
        if project.live_url:
            links.append(ProjectLinkView(project.live_url, "fas fa-external-link-alt", "Live Demo"))
        if project.code_url:
            links.append(ProjectLinkView(project.code_url, "fab fa-github", "Source Code"))
        projects.append(
            ProjectView(
                icon=project.icon,
                title=project.title,
                description=project.description,
                technologies=list(project.technologies),
                links=links,
            )
        )
    return projects


def contact_view(data: PortfolioData) -> ContactView:
    contact = data.contact
    return ContactView(
        description=contact.description,
        links=[ContactLinkView(link.url, link.icon, link.label) for link in contact.links],
    )


__all__ = [
    "AboutView",
    "ContactView",
    "ExperienceView",
    "HeroView",
    "ProjectView",
    "SkillView",
    "about_view",
    "contact_view",
    "experience_view",
    "hero_view",
    "profile_image_available",
    "projects_view",
    "skills_view",
]

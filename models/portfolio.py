from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    # Okända nycklar i JSON-filen ignoreras, ingen schemakontroll utöver typerna
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Personal(_Record):
    name: str = Field("", description="Namn")
    title: str = Field("", description="Yrkestitel")
    description: str = Field("", description="Kort presentation")


class Stat(_Record):
    value: Union[str, int, float] = Field("", description="Siffra som visas stort")
    label: str = Field("", description="Etikett under siffran")


class About(_Record):
    description: List[str] = Field(default_factory=list, description="Stycken i om-sektionen")
    stats: List[Stat] = Field(default_factory=list)


class Skill(_Record):
    icon: str = Field("", description="Ikonklass")
    name: str = ""
    level: str = ""


class Experience(_Record):
    period: str = ""
    position: str = ""
    company: str = ""
    description: str = ""


class Project(_Record):
    icon: str = Field("", description="Ikonklass")
    title: str = ""
    description: str = ""
    technologies: List[str] = Field(default_factory=list)
    live_url: Optional[str] = Field(None, alias="liveUrl", description="Länk till demo")
    code_url: Optional[str] = Field(None, alias="codeUrl", description="Länk till källkod")


class ContactLink(_Record):
    url: str = ""
    icon: str = ""
    label: str = ""


class Contact(_Record):
    description: str = ""
    links: List[ContactLink] = Field(default_factory=list)


class PortfolioData(_Record):
    """Hela innehållsdokumentet (portfolio.json)."""

    personal: Personal = Field(default_factory=Personal)
    about: About = Field(default_factory=About)
    skills: List[Skill] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    contact: Contact = Field(default_factory=Contact)

from __future__ import annotations

import os
from pathlib import Path


class Settings:
    """Grundläggande inställningar för portfoliosidan."""

    def __init__(self) -> None:
        self.base_dir = Path(__file__).resolve().parent.parent
        self.data_dir = Path(os.getenv("PORTFOLIO_DATA_DIR", str(self.base_dir / "data")))
        self.static_dir = self.base_dir / "static"
        self.template_dir = self.base_dir / "templates"
        self.portfolio_source = os.getenv("PORTFOLIO_SOURCE", str(self.data_dir / "portfolio.json"))
        self.cv_source = os.getenv("PORTFOLIO_CV_SOURCE", str(self.data_dir / "cv.pdf"))
        self.profile_image = os.getenv("PORTFOLIO_PROFILE_IMAGE", "images/profile.jpg")
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.log_level = "DEBUG" if self.debug else os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def database_path(self) -> Path:
        return self.data_dir / "app.db"


settings = Settings()

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core.config import settings
from core.database import init_db
from core.logging_config import configure_logging
from routes import pages, portfolio, theme

configure_logging(settings.log_level)

app = FastAPI(title="Portfolio", debug=settings.debug)

# Initiera databasen vid start
init_db()

# Routers
app.include_router(pages.router)
app.include_router(portfolio.router, prefix="/api", tags=["portfolio"])
app.include_router(theme.router, prefix="/api", tags=["theme"])

# Static files
app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")


@app.get("/health")
def health_check() -> dict[str, str]:
    """Enkel hälso-kontroll för lokal utveckling."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=8000, reload=True)

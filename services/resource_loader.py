from __future__ import annotations

from pathlib import Path

import httpx

from core.config import settings
from core.errors import ResourceError


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_resource(source: str, transport: httpx.BaseTransport | None = None) -> bytes:
    """Hämta en resurs från URL eller lokal sökväg. Ett försök, ingen cache."""
    if is_remote(source):
        try:
            with httpx.Client(transport=transport) as client:
                response = client.get(source)
        except httpx.HTTPError as exc:
            raise ResourceError(f"Network error fetching {source}: {exc}") from exc
        if not response.is_success:
            raise ResourceError(f"HTTP error! status: {response.status_code}", status_code=response.status_code)
        return response.content

    path = Path(source)
    if not path.is_absolute():
        # Relativa sökvägar utgår från projektroten, inte arbetskatalogen
        path = settings.base_dir / path
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise ResourceError(f"File not found: {path}", status_code=404) from exc
    except OSError as exc:
        raise ResourceError(f"Could not read {path}: {exc}") from exc


__all__ = ["fetch_resource", "is_remote"]

"""HTML/JSON response rendering with Accept-header negotiation."""

from pathlib import Path
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _media_ranges(accept: str) -> dict[str, float]:
    ranges: dict[str, float] = {}
    for part in accept.split(","):
        media_type, _, params = part.strip().partition(";")
        media_type = media_type.strip().lower()
        if not media_type:
            continue
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        ranges[media_type] = max(quality, ranges.get(media_type, 0.0))
    return ranges


def prefers_json(accept: str | None) -> bool:
    """
    Return True when the Accept header ranks JSON strictly above HTML.

    Browsers and clients sending no Accept header (or */*) get HTML.
    """
    if not accept:
        return False
    ranges = _media_ranges(accept)
    wildcard = ranges.get("*/*", 0.0)
    json_q = ranges.get("application/json", ranges.get("application/*", wildcard))
    html_q = ranges.get("text/html", ranges.get("text/*", wildcard))
    return json_q > html_q


def render(request: Request, template: str, context_key: str, value: Any) -> Response:
    """Emit the extracted value as a rendered view or as a JSON body."""
    if prefers_json(request.headers.get("accept")):
        return JSONResponse(content=value)
    return templates.TemplateResponse(request, template, {context_key: value})


__all__ = ["prefers_json", "render", "templates"]

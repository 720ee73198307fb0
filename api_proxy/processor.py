"""Base processor interface for API-proxy services."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List

from pydantic import BaseModel

from .models import NoQuery


@dataclass
class ProxyAction:
    """
    Definition of a GET route that proxies one upstream API call.

    Attributes:
        name: Short identifier used for logging and OpenAPI docs.
        path: FastAPI route path (e.g., "/").
        build_url: Callable returning the upstream URL for a validated query.
        payload_model: Pydantic model the upstream JSON body must match.
        extract: Callable pulling the value to emit out of the validated payload.
        context_key: Name the extracted value is bound to in the template.
        template: Jinja2 template used for HTML responses.
        error_message: Fixed plain-text body sent with HTTP 500 on failure.
        query_model: Pydantic model for query-string validation.
        summary: Optional OpenAPI summary.
        description: Optional longer description.
        tags: Optional OpenAPI tags.
    """

    name: str
    path: str
    build_url: Callable[[BaseModel], str]
    payload_model: type[BaseModel]
    extract: Callable[[Any], Any]
    context_key: str
    template: str
    error_message: str
    query_model: type[BaseModel] = NoQuery
    summary: str | None = None
    description: str | None = None
    tags: tuple[str, ...] | None = None


class BaseProcessor(ABC):
    """Hook point for API-proxy services."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Processor/service name used for logging and metadata."""

    @property
    def version(self) -> str:
        """Optional semantic version string."""
        return "1.0.0"

    def get_proxy_actions(self) -> List[ProxyAction]:
        """
        Return the list of proxy actions provided by this processor.

        Override in subclasses to expose proxied endpoints.
        """
        return []

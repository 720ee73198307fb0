"""Models shared by the proxy services and the upstream payloads they consume."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    version: str = Field(default="1.0.0")


class ErrorResponse(BaseModel):
    """Error response envelope."""

    error: str = Field(..., description="High-level error message")
    detail: str | None = Field(None, description="Additional context for debugging")


class NoQuery(BaseModel):
    """Query model for actions that accept no parameters."""


class DogImageQuery(BaseModel):
    """Query parameters accepted by the dog image route."""

    breed: str | None = Field(None, description="Breed to pick the image from, e.g. 'hound'.")


class DogImagePayload(BaseModel):
    """Body returned by the dog.ceo random image endpoints."""

    message: str = Field(..., description="URL of the random image.")
    status: str | None = None


class CatFact(BaseModel):
    fact: str
    length: int | None = None


class CatFactsPage(BaseModel):
    """One page of the catfact.ninja facts listing."""

    data: list[CatFact]

"""Processor that proxies the dog.ceo random image API."""

from typing import List
from urllib.parse import quote

from ..config import settings
from ..models import DogImagePayload, DogImageQuery
from ..processor import BaseProcessor, ProxyAction


class DogImageProcessor(BaseProcessor):
    """Shows a random dog image, optionally restricted to one breed."""

    def __init__(self, base_url: str | None = None):
        self.base_url = (base_url or settings.dog_api_base_url).rstrip("/")

    @property
    def name(self) -> str:
        return "dog-image"

    def get_proxy_actions(self) -> List[ProxyAction]:
        return [
            ProxyAction(
                name="random_dog_image",
                path="/",
                build_url=self.image_url,
                payload_model=DogImagePayload,
                extract=lambda payload: payload.message,
                context_key="imageUrl",
                template="dog_image.html",
                error_message="Error fetching image",
                query_model=DogImageQuery,
                summary="Show a random dog image.",
                description=(
                    "Fetches a random image from dog.ceo. Pass `breed` to pick from a single "
                    "breed. Returns an HTML page, or the image URL as JSON when the client "
                    "prefers application/json."
                ),
                tags=("dogs",),
            ),
        ]

    def image_url(self, query: DogImageQuery) -> str:
        """
        Upstream URL for the query; a blank breed means any breed.

        Sub-breeds are separate path segments ("hound/afghan"). Each segment is
        percent-encoded on its own and "." or ".." segments are dropped.
        """
        segments = [
            quote(part.strip(), safe="")
            for part in (query.breed or "").split("/")
            if part.strip() not in ("", ".", "..")
        ]
        if segments:
            return f"{self.base_url}/breed/{'/'.join(segments)}/images/random"
        return f"{self.base_url}/breeds/image/random"

"""Processor that proxies the catfact.ninja facts listing."""

from typing import List

from ..config import settings
from ..models import CatFactsPage
from ..processor import BaseProcessor, ProxyAction


def fact_strings(page: CatFactsPage) -> list[str]:
    return [item.fact for item in page.data]


class CatFactsProcessor(BaseProcessor):
    """Lists cat facts from the first page of catfact.ninja."""

    def __init__(self, facts_url: str | None = None):
        self.facts_url = facts_url or settings.cat_facts_url

    @property
    def name(self) -> str:
        return "cat-facts"

    def get_proxy_actions(self) -> List[ProxyAction]:
        return [
            ProxyAction(
                name="cat_facts",
                path="/",
                build_url=lambda query: self.facts_url,
                payload_model=CatFactsPage,
                extract=fact_strings,
                context_key="catsFacts",
                template="cat_facts.html",
                error_message="Error fetching cat facts",
                summary="List cat facts.",
                description=(
                    "Fetches facts from catfact.ninja. Returns an HTML page with one paragraph "
                    "per fact, or the facts as a JSON array when the client prefers "
                    "application/json."
                ),
                tags=("cats",),
            ),
        ]

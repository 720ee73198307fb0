"""Proxy services built on the api_proxy toolkit."""

from .cat_facts import CatFactsProcessor
from .dog_images import DogImageProcessor

__all__ = ["CatFactsProcessor", "DogImageProcessor"]

#!/usr/bin/env python3
"""
Entrypoint for the proxy services.

Usage:
    api-proxy dog             # dog image proxy on port 3000
    api-proxy cat --port 8080 # cat facts proxy on port 8080
"""

import argparse

import uvicorn
from fastapi import FastAPI

from .api import ServiceConfig, create_app
from .config import settings
from .services import CatFactsProcessor, DogImageProcessor


def create_dog_app() -> FastAPI:
    """Build the dog image proxy from settings."""
    return create_app(
        DogImageProcessor(),
        ServiceConfig(description="Random dog images proxied from dog.ceo."),
    )


def create_cat_app() -> FastAPI:
    """Build the cat facts proxy from settings."""
    return create_app(
        CatFactsProcessor(),
        ServiceConfig(description="Cat facts proxied from catfact.ninja."),
    )


SERVICES = {
    "dog": (create_dog_app, lambda: settings.dog_port),
    "cat": (create_cat_app, lambda: settings.cat_port),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run one of the API proxy services.")
    parser.add_argument("service", choices=sorted(SERVICES), help="Service to run.")
    parser.add_argument(
        "--host",
        default=settings.host,
        help="Interface to bind (default: %(default)s).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: the service's configured port).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the selected service."""
    args = _build_parser().parse_args(argv)
    factory, default_port = SERVICES[args.service]

    uvicorn.run(
        factory(),
        host=args.host,
        port=args.port or default_port(),
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Command-line entrypoint that runs one resource service under uvicorn."""

from __future__ import annotations

import argparse

import uvicorn

from src.api.api_config import ApiConfig, load_api_config
from src.api.app import create_app
from src.common.settings import get_settings
from src.resources.definitions import RESOURCE_DEFINITIONS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run an in-memory resource service")
    parser.add_argument("--service", required=True, choices=sorted(RESOURCE_DEFINITIONS))
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    definition = RESOURCE_DEFINITIONS[args.service]

    config = load_api_config(definition)
    overrides = {
        key: value
        for key, value in {"host": args.host, "port": args.port}.items()
        if value is not None
    }
    if overrides:
        config = ApiConfig.model_validate({**config.model_dump(), **overrides})

    app = create_app(definition, config=config)
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=get_settings().LOG_LEVEL.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()

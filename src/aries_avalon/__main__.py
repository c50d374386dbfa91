"""Run the service: ``python -m aries_avalon [-port N] [-solrurl URL] ...``.

Flags override the environment / ``config.toml`` settings for this process.
"""

import argparse

import uvicorn

from aries_avalon.main import create_app
from aries_avalon.platform.config import Settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="aries-avalon", description=__doc__)
    parser.add_argument(
        "-port", "--port", type=int, dest="api_port", help="Listen port"
    )
    parser.add_argument(
        "-solrurl", "--solrurl", dest="solr_url", help="Avalon Solr base URL"
    )
    parser.add_argument(
        "-solrcore", "--solrcore", dest="solr_core", help="Avalon Solr core"
    )
    parser.add_argument(
        "-avalonurl", "--avalonurl", dest="avalon_url", help="Avalon URL"
    )
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build settings, letting explicitly passed flags win."""
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    return Settings(**overrides)


def main(argv: list[str] | None = None) -> None:
    settings = settings_from_args(parse_args(argv))
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

"""
Main entry point for the Roster platform.
"""

import argparse
import logging
import sys
from typing import Optional

import uvicorn

from .api.rest_api import RosterRestAPI
from .config import Settings
from .services.registry import ServiceRegistry

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


class RosterPlatform:
    """Wires settings, record stores, services and the REST app."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()
        logger.info("Initializing Roster platform (data dir: %s)", self._settings.data_dir)

        self._services = ServiceRegistry.from_directory(self._settings.data_dir)
        self._rest_api = RosterRestAPI(
            self._services,
            title=self._settings.api_title,
            cors_origins=self._settings.cors_origins,
        )
        logger.info("Roster platform initialized")

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def services(self) -> ServiceRegistry:
        return self._services

    @property
    def app(self):
        return self._rest_api.app

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None) -> None:
        """Serve the REST API until interrupted."""
        host = host or self._settings.host
        port = port or self._settings.port
        logger.info("REST API on http://%s:%s (docs at /docs)", host, port)
        uvicorn.run(self.app, host=host, port=port, log_level=self._settings.log_level.lower())


def create_app(settings: Optional[Settings] = None):
    """Application factory for ``uvicorn --factory roster.main:create_app``."""
    return RosterPlatform(settings).app


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Roster school records service")
    parser.add_argument("--host", type=str, help="REST server host")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--data-dir", type=str, help="Directory for the JSON record files")
    parser.add_argument("--log-level", type=str, help="Logging level")
    parser.add_argument("--demo", action="store_true", help="Run the demo scenario and exit")

    args = parser.parse_args(argv)

    overrides = {}
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = Settings(**overrides)
    setup_logging(settings.log_level)

    if args.demo:
        from .demo import run_demo
        run_demo(settings.data_dir)
        return

    platform = RosterPlatform(settings)
    try:
        platform.start_rest_server(args.host, args.port)
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    main()

"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, model: str, source: str) -> None:
        self._log.info("config.loaded", model=model, source=source)

    def config_env_file_missing(self, path: str) -> None:
        self._log.warning(
            "config.env_file_missing",
            path=path,
            message="No .env file found; using the process environment only",
        )

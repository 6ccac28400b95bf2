"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, model: str, source: str) -> None: ...

    def config_env_file_missing(self, path: str) -> None: ...

"""Config loader: .env file, optional YAML file and CLI overrides."""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from code_agent.config.domain.config import AgentConfig
from code_agent.config.domain.observer import ConfigObserver
from code_agent.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from code_agent.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

OPENAI_API_KEY_VAR = "OPENAI_API_KEY"
DEFAULT_ENV_FILE = Path(".env")


class AgentConfigLoader:
    """Builds the AgentConfig for a session from every configuration source.

    Precedence, lowest first: built-in defaults, the YAML file, CLI overrides.
    A .env file is loaded into the environment first without replacing
    variables that are already set.
    """

    def __init__(
        self, observer: ConfigObserver, env_file: Path = DEFAULT_ENV_FILE
    ) -> None:
        self._observer = observer
        self._env_file = env_file

    def load(
        self,
        path: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> AgentConfig:
        """
        Load, interpolate, validate, and return the AgentConfig.

        Raises:
            ConfigLoadError: if path is given but does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all
                collected first), or no API key is available for an OpenAI model.
            ConfigValidationError: if the YAML is malformed or the schema is violated.
        """
        self._load_env_file()

        raw = _read_yaml(path=path) if path is not None else {}
        _check_missing_env_vars(raw=raw)
        merged = _merge(base=interpolate(raw), overrides=overrides or {})
        cfg = _build_config(resolved=_with_default_api_key(merged))
        _check_credentials(cfg=cfg)

        self._observer.config_loaded(
            model=cfg.inference.model,
            source=str(path) if path is not None else "defaults",
        )
        return cfg

    def _load_env_file(self) -> None:
        if not self._env_file.is_file():
            self._observer.config_env_file_missing(path=str(self._env_file))
            return
        load_dotenv(dotenv_path=self._env_file, override=False)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(reason=f"invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            reason=f"top level of {path} must be a mapping, got {type(raw).__name__}"
        )
    return raw


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _merge(base: Any, overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay overrides onto base; None override values are ignored."""
    merged: dict[str, Any] = dict(base) if isinstance(base, dict) else {}
    for key, value in overrides.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(base=merged[key], overrides=value)
        else:
            merged[key] = value
    return merged


def _with_default_api_key(merged: dict[str, Any]) -> dict[str, Any]:
    """Fill inference.api_key from OPENAI_API_KEY when the config sets none."""
    inference = merged.get("inference") or {}
    if not isinstance(inference, dict) or inference.get("api_key"):
        return merged
    env_key = os.environ.get(OPENAI_API_KEY_VAR)
    if not env_key:
        return merged
    return {**merged, "inference": {**inference, "api_key": env_key}}


def _build_config(resolved: dict[str, Any]) -> AgentConfig:
    try:
        return AgentConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(reason=str(exc)) from exc


def _check_credentials(cfg: AgentConfig) -> None:
    """Fail fast when an OpenAI model has no key and no custom endpoint."""
    inference = cfg.inference
    if inference.api_key or inference.api_base:
        return
    if _is_openai_model(model=inference.model):
        raise MissingEnvVarsError([OPENAI_API_KEY_VAR])


def _is_openai_model(model: str) -> bool:
    return "/" not in model or model.startswith("openai/")

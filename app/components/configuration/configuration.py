import json
import os
from pathlib import Path
from typing import Any, TypeVar, cast

from app.components.configuration.configuration_interface import (
    ConfigurationInterface,
)

T = TypeVar("T")

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class Configuration(ConfigurationInterface):
    """
    Environment-specific configuration.

    Values are read from ``<config_path>/<env>.json``. Environment variables
    with the same name take precedence over the file, so secrets and local
    overrides can live in ``.env`` (loaded by python-dotenv at bootstrap).
    """

    def __init__(self, env: str, config_path: str) -> None:
        self.env = env
        self.config_path = config_path
        self._values: dict[str, Any] = self._load_file()

    def _load_file(self) -> dict[str, Any]:
        path = Path(self.config_path) / f"{self.env}.json"
        if not path.exists():
            return {}

        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain an object")
        return data

    def get_configuration(
        self, key: str, value_type: type[T], default: Any = None
    ) -> T:
        raw: Any = os.getenv(key)
        if raw is None or raw == "":
            raw = self._values.get(key)

        if raw is None:
            if default is None:
                raise ValueError(f"Configuration key {key} not found")
            return cast(T, default)

        return self._cast(key, raw, value_type)

    @staticmethod
    def _cast(key: str, raw: Any, value_type: type[T]) -> T:
        if value_type is bool and isinstance(raw, str):
            lowered = raw.strip().lower()
            if lowered in _TRUE_VALUES:
                return cast(T, True)
            if lowered in _FALSE_VALUES:
                return cast(T, False)
            raise ValueError(f"Configuration key {key} is not a boolean: {raw!r}")

        try:
            return cast(T, value_type(raw))  # type: ignore[call-arg]
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Configuration key {key} cannot be read as {value_type.__name__}: {raw!r}"
            ) from exc

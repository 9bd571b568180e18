"""Config – Settings base dataclass and the environment loader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from latency_harness.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings; subclasses set ``_prefix``."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject out-of-range values."""


T = TypeVar("T", bound=Settings)

_TRUTHY = ("1", "true", "yes", "on")


class SettingsLoader(abc.ABC):
    """Port: build a settings instance from some external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read each field ``name`` from ``<PREFIX>_<NAME>``.

    Absent variables keep the field default.  Values are coerced to
    ``bool``, ``int``, ``float`` or a comma-separated ``list``.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(value: str, type_hint: Any) -> Any:
        # Annotations are strings under ``from __future__ import annotations``.
        if type_hint in (bool, "bool"):
            return value.strip().lower() in _TRUTHY
        if type_hint in (int, "int"):
            return int(value)
        if type_hint in (float, "float"):
            return float(value)
        if getattr(type_hint, "__origin__", None) is list or str(type_hint).startswith("list["):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]

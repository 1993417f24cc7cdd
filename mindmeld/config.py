from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional
import logging
import os

import yaml

from mindmeld.errors import ConfigError

logger = logging.getLogger(__name__)

TAPE_SIZE = 30000
ENV_PREFIX = "MINDMELD_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class RunConfig:
    """Options for one interpreter invocation.

    Passed explicitly to the sanitizer, interpreters and runner; nothing in
    the package reads mode flags from global state.
    """
    switch_mode: bool = False
    tokenized: bool = False
    tape_size: int = TAPE_SIZE
    max_steps: Optional[int] = None
    show_instructions: bool = True
    pause_on_exit: bool = True

    def __post_init__(self):
        if self.tape_size < 1:
            raise ConfigError(f"tape_size must be positive, got {self.tape_size}")
        if self.max_steps is not None and self.max_steps < 0:
            raise ConfigError(f"max_steps must not be negative, got {self.max_steps}")

    def merged(self, **overrides) -> "RunConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: Optional["RunConfig"] = None) -> "RunConfig":
        base = base or cls()
        known = {f.name: f for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                raise ConfigError(f"Unknown config key '{key}'")
            values[key] = _coerce(key, value)
        return replace(base, **values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, base: Optional["RunConfig"] = None) -> "RunConfig":
        """Overlay MINDMELD_* environment variables on ``base``."""
        environ = os.environ if environ is None else environ
        data = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is not None:
                data[f.name] = raw
        if data:
            logger.debug("Config from environment: %s", sorted(data))
        return cls.from_dict(data, base=base)


def _coerce(key: str, value: Any) -> Any:
    if key in ("tape_size", "max_steps"):
        if value is None or (isinstance(value, str) and value.strip().lower() in ("", "none")):
            if key == "max_steps":
                return None
            raise ConfigError(f"{key} must be an integer")
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            raise ConfigError(f"{key} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{key} must be an integer, got {value!r}") from None

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


def load_config(path: str, base: Optional[RunConfig] = None) -> RunConfig:
    """Load a RunConfig from a YAML mapping, e.g.:

        switch_mode: true
        tokenized: true
        max_steps: 100000
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Could not read config {path}: {e.strerror}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return base or RunConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    logger.debug("Loaded config from %s", path)
    return RunConfig.from_dict(data, base=base)

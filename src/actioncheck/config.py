from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_PREFIX_TEMPLATE = "When calling {action} action in {controller} expected"


class AssertionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    prefix_template: str = DEFAULT_PREFIX_TEMPLATE
    stream_chunk_size: int = 64 * 1024
    debug_log: Path | None = None
    verbose: bool = False

    @field_validator("prefix_template")
    @classmethod
    def prefix_template_names_action(cls, v: str) -> str:
        if "{action}" not in v:
            raise ValueError("prefix_template must contain the '{action}' placeholder")
        # Only {action} and {controller} may be referenced.
        try:
            v.format(action="", controller="")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"prefix_template '{v}' cannot be formatted: {e!r}") from e
        return v

    @field_validator("stream_chunk_size")
    @classmethod
    def chunk_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("stream_chunk_size must be positive")
        return v

    @field_validator("debug_log", mode="before")
    @classmethod
    def expand_debug_log(cls, v: object) -> object:
        """Expand ${VAR} references in the debug log path.

        Raises ValueError naming the variable when it is unset and has no
        default, so a misconfigured CI environment fails at load time.
        """
        if not isinstance(v, str):
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"debug_log '{v}' references a missing environment variable: {e}") from e


def load_config(path: Path) -> AssertionConfig:
    """Load and validate assertion settings from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = AssertionConfig(**raw)

    # Resolve a relative debug log relative to the config file location
    if config.debug_log is not None and not config.debug_log.is_absolute():
        config.debug_log = (config_dir / config.debug_log).resolve()

    return config

"""Top-level mdlc configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.logger import get_home_dir
from .CheckConfig import CheckConfig
from .LogConfig import LogConfig
from .WalkConfig import WalkConfig


class MdlcConfig(BaseModel):
    """Top-level configuration for the link checker."""

    model_config = ConfigDict(extra="forbid")

    check: CheckConfig = Field(default_factory=CheckConfig)
    walk: WalkConfig = Field(default_factory=WalkConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get mdlc home directory based on MDLC_HOME or default to ~/.mdlc."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on MDLC_HOME or default to ~/.mdlc."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "MdlcConfig":
        """Load and validate config from file.

        Every section is optional; a missing config file yields the defaults.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        if path is None:
            path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert MdlcConfig instance to a dictionary for serialization."""
        return {
            "check": self.check.model_dump(),
            "walk": self.walk.model_dump(),
            "log": self.log.model_dump(),
        }

    def with_check_overrides(self, **overrides: Any) -> "MdlcConfig":
        """Return a copy with check values replaced, skipping overrides left as None.

        Values are re-validated so CLI input gets the same checks as the config file.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        check = CheckConfig(**{**self.check.model_dump(), **updates})
        return self.model_copy(update={"check": check})

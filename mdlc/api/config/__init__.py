"""Config API."""

from .CheckConfig import CheckConfig
from .LogConfig import LogConfig
from .MdlcConfig import MdlcConfig
from .WalkConfig import WalkConfig

__all__ = ["CheckConfig", "LogConfig", "MdlcConfig", "WalkConfig"]

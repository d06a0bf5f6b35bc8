"""Profile Image Generator - programmer avatars from preset styles."""

__version__ = "0.1.0"

from profilegen.core.config import ProfilegenConfig, config
from profilegen.core.controller import RequestController

__all__ = [
    "ProfilegenConfig",
    "RequestController",
    "config",
]

"""Data models for the Profile Image Generator UI state."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from profilegen.core.outcome import PNG_MIME_TYPE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""


@dataclass(frozen=True)
class Loading:
    """A generation request is in flight."""


@dataclass(frozen=True)
class Ready:
    """An image is available for display and download."""

    image_bytes: bytes = field(repr=False)
    mime_type: str = PNG_MIME_TYPE


@dataclass(frozen=True)
class Error:
    """The last request failed; ``message`` is shown to the user."""

    message: str


ViewState = Idle | Loading | Ready | Error


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each user gets their own UIState instance, so the view and the controller
    are never shared between sessions.

    Attributes
    ----------
    view : ViewState
        Current display state
    controller : Any | None
        RequestController instance, created on first generation
    image_dir : Path | None
        Directory holding this session's image, created on first success
    """

    view: ViewState = field(default_factory=Idle)
    controller: Any | None = None  # RequestController instance
    image_dir: Path | None = None

    @property
    def is_loading(self) -> bool:
        return isinstance(self.view, Loading)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"UIState(view={type(self.view).__name__}, controller={self.controller is not None})"


# UI Constants
LOADING_TEXT = "Generating..."
PLACEHOLDER_TEXT = "Your image will appear here."

"""View state transitions for the Profile Image Generator UI.

Every view transition here is pure: it takes the current view and returns the next
one. Transitions that do not apply to the current view return it unchanged,
so the transitions are total and the display layer never sees an illegal
combination such as loading with an error.

    Idle    --start_request--> Loading
    Loading --succeed-------> Ready
    Loading --fail----------> Error
    Ready   --start_request--> Loading
    Error   --start_request--> Loading

``start_request`` on ``Loading`` is rejected. The caller must then skip the
request controller, which is how overlapping requests are prevented.
"""

import logging
from pathlib import Path

from profilegen.core.outcome import PNG_MIME_TYPE, Failure, GenerationOutcome, Success

from .download import create_image_dir, remove_image_dir
from .models import Error, Loading, Ready, UIState, ViewState

logger = logging.getLogger(__name__)


def initialize_ui_state(state: UIState | None = None) -> UIState:
    """Create a fresh UIState if none exists yet.

    Args:
        state: Existing UIState or None

    Returns:
        UIState instance
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()
    return state


def start_request(view: ViewState) -> tuple[ViewState, bool]:
    """Enter ``Loading`` unless a request is already in flight.

    Args:
        view: Current view state

    Returns:
        Tuple of (next_view, accepted). ``accepted`` is False when the view
        was already ``Loading``; the view is then returned unchanged.
    """
    if isinstance(view, Loading):
        logger.info("Request suppressed: a generation is already in progress")
        return view, False
    return Loading(), True


def succeed(view: ViewState, image_bytes: bytes, mime_type: str = PNG_MIME_TYPE) -> ViewState:
    """Move from ``Loading`` to ``Ready`` with the generated image."""
    if not isinstance(view, Loading):
        logger.warning(f"Ignoring success while in {type(view).__name__}")
        return view
    return Ready(image_bytes=image_bytes, mime_type=mime_type)


def fail(view: ViewState, message: str) -> ViewState:
    """Move from ``Loading`` to ``Error`` with a user-facing message."""
    if not isinstance(view, Loading):
        logger.warning(f"Ignoring failure while in {type(view).__name__}")
        return view
    return Error(message=message)


def apply_outcome(view: ViewState, outcome: GenerationOutcome) -> ViewState:
    """Apply a terminal generation outcome to the view."""
    if isinstance(outcome, Success):
        return succeed(view, outcome.image_bytes, outcome.mime_type)
    if isinstance(outcome, Failure):
        return fail(view, outcome.reason)
    raise TypeError(f"Unsupported outcome: {outcome!r}")


def session_image_dir(state: UIState) -> Path:
    """Return the session's image directory, creating it on first use."""
    if state.image_dir is None:
        state.image_dir = create_image_dir()
    return state.image_dir


def cleanup_ui_state(state: UIState) -> None:
    """Clean up UI state resources.

    This is called when a session ends so its image directory does not
    outlive it.

    Args:
        state: UI state to clean up
    """
    logger.info("Cleaning up UIState resources")
    remove_image_dir(state.image_dir)
    state.image_dir = None
    state.controller = None

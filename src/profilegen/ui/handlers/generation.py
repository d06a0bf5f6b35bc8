"""Image generation handlers."""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable

from profilegen.core.config import config
from profilegen.core.controller import RequestController
from profilegen.core.outcome import Failure, FailureKind, Success
from profilegen.core.styles import get_style_prompt

from ..download import save_image_file
from ..models import UIState
from ..state import apply_outcome, initialize_ui_state, session_image_dir, start_request
from .display import render_view

logger = logging.getLogger(__name__)


async def generate_for_style(style_name: str, state: UIState | None) -> AsyncIterator[tuple]:
    """Run one generation for a preset style, yielding page updates.

    Yields the loading view first and the terminal view once the request
    controller returns. If a generation is already in flight the current
    view is re-rendered and the controller is not called. A generated image
    is written to the session's image directory, replacing the previous one.

    Args:
        style_name: Catalog style name
        state: UI state

    Yields:
        Tuple of (*component_updates, updated_state)
    """
    state = initialize_ui_state(state)

    state.view, accepted = start_request(state.view)
    yield (*render_view(state.view), state)
    if not accepted:
        return

    logger.info(f"Generating image for style: {style_name}")
    image_path = None
    try:
        if state.controller is None:
            state.controller = RequestController()
        outcome = await state.controller.generate(get_style_prompt(style_name))
        if isinstance(outcome, Success):
            saved = await asyncio.to_thread(
                save_image_file,
                outcome.image_bytes,
                config.download_filename,
                session_image_dir(state),
            )
            image_path = str(saved)
    except Exception as e:
        # The controller never raises; this covers style lookup, setup and saving.
        logger.error(f"Error during generation: {e}", exc_info=True)
        outcome = Failure(kind=FailureKind.UNKNOWN, reason=config.failure_message)

    state.view = apply_outcome(state.view, outcome)
    logger.info(f"Generation for '{style_name}' finished: {type(state.view).__name__}")
    yield (*render_view(state.view, image_path), state)


def make_style_handler(style_name: str) -> Callable[[UIState], AsyncIterator[tuple]]:
    """Bind ``generate_for_style`` to one style for a button click event."""

    async def handler(state: UIState) -> AsyncIterator[tuple]:
        async for update in generate_for_style(style_name, state):
            yield update

    handler.__name__ = f"generate_{style_name}"
    return handler

"""Rendering of the view state into Gradio component updates."""

import logging

import gradio as gr

from profilegen.core.styles import list_styles

from ..models import LOADING_TEXT, Error, Idle, Loading, Ready, ViewState

logger = logging.getLogger(__name__)


def render_view(view: ViewState, image_path: str | None = None) -> tuple:
    """Map a view state to updates for the page components.

    Args:
        view: Current view state
        image_path: Saved image file for a ``Ready`` view

    Returns:
        Tuple of (*style_button_updates, image_update, placeholder_update,
        status_update, download_update)
    """
    interactive = not isinstance(view, Loading)
    buttons = tuple(gr.update(interactive=interactive) for _ in list_styles())

    if isinstance(view, Ready):
        if image_path is None:
            logger.warning("Ready view rendered without a saved image file")
        shown = image_path is not None
        return (
            *buttons,
            gr.update(value=image_path, visible=shown),
            gr.update(visible=not shown),
            gr.update(value="", visible=False),
            gr.update(value=image_path, visible=shown),
        )

    if isinstance(view, Loading):
        return (
            *buttons,
            gr.update(value=None, visible=False),
            gr.update(visible=False),
            gr.update(value=f"⏳ {LOADING_TEXT}", visible=True),
            gr.update(value=None, visible=False),
        )

    if isinstance(view, Error):
        return (
            *buttons,
            gr.update(value=None, visible=False),
            gr.update(visible=True),
            gr.update(value=f"❌ {view.message}", visible=True),
            gr.update(value=None, visible=False),
        )

    if not isinstance(view, Idle):
        logger.warning(f"Unknown view state {view!r}, rendering as idle")
    return (
        *buttons,
        gr.update(value=None, visible=False),
        gr.update(visible=True),
        gr.update(value="", visible=False),
        gr.update(value=None, visible=False),
    )

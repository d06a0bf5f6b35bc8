"""UI event handlers organized by feature area.

- generation: Style button clicks driving the request controller
- display: Rendering the view state into component updates
"""

from .display import render_view
from .generation import generate_for_style, make_style_handler

__all__ = [
    "generate_for_style",
    "make_style_handler",
    "render_view",
]

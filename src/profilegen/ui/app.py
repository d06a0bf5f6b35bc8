"""Gradio UI for the Profile Image Generator."""

import logging

import gradio as gr

from profilegen.core.config import config
from profilegen.core.styles import STYLE_LABELS, list_styles

from .handlers import make_style_handler
from .models import PLACEHOLDER_TEXT, UIState
from .state import cleanup_ui_state

# Configure logging
logging.basicConfig(
    level=config.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> gr.Blocks:
    """Create the single-page Gradio UI.

    Returns:
        Gradio Blocks app
    """
    app = gr.Blocks(title="Programmer Profile Image Generator")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState(), delete_callback=cleanup_ui_state)

        gr.Markdown(
            """
            # Programmer Profile Image Generator
            Pick one of the styles below to generate an eye-catching profile picture
            for your GitHub account.
            """
        )

        with gr.Row():
            style_buttons = [
                gr.Button(STYLE_LABELS[name], variant="primary") for name in list_styles()
            ]

        with gr.Column():
            image_output = gr.Image(
                label="Profile Image",
                type="filepath",
                height=400,
                visible=False,
                interactive=False,
            )
            placeholder = gr.Markdown(PLACEHOLDER_TEXT)
            status = gr.Markdown(visible=False)
            download_button = gr.DownloadButton(
                "Download Image",
                visible=False,
            )

        outputs = [*style_buttons, image_output, placeholder, status, download_button, ui_state]

        for name, button in zip(list_styles(), style_buttons):
            button.click(
                fn=make_style_handler(name),
                inputs=[ui_state],
                outputs=outputs,
                # Overlap is rejected per session by start_request, not by queueing
                concurrency_limit=None,
            )

    return app


def main():
    """Main entry point for the application."""
    logger.info("Starting Programmer Profile Image Generator...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    app = create_ui()

    logger.info(f"Launching Gradio UI on {config.server_name}:{config.server_port}")

    app.launch(
        server_name=config.server_name,
        server_port=config.server_port,
        share=config.share,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    main()

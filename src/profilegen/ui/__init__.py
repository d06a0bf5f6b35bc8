"""Gradio user interface for the Profile Image Generator."""

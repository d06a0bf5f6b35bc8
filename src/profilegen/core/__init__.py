"""Core functionality for image generation.

This module provides the core components of the Profile Image Generator:

- **RequestController**: Runs one generation request to a terminal outcome
- **RetryPolicy**: Bounded exponential backoff with jitter
- **GenerationRequest** and the style catalog: The three preset prompts
- **Success / Failure**: Terminal outcomes of a request
- **ProfilegenConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)

Usage Example
-------------
    from profilegen.core import RequestController, get_style_prompt

    controller = RequestController()
    outcome = await controller.generate(get_style_prompt("futuristic"))
"""

from profilegen.core.config import ProfilegenConfig, config
from profilegen.core.controller import RequestController
from profilegen.core.outcome import Failure, FailureKind, GenerationOutcome, Success
from profilegen.core.retry import RetryPolicy
from profilegen.core.styles import (
    STYLE_LABELS,
    GenerationRequest,
    UnknownStyleError,
    get_style_prompt,
    list_styles,
)

__all__ = [
    "Failure",
    "FailureKind",
    "GenerationOutcome",
    "GenerationRequest",
    "ProfilegenConfig",
    "RequestController",
    "RetryPolicy",
    "STYLE_LABELS",
    "Success",
    "UnknownStyleError",
    "config",
    "get_style_prompt",
    "list_styles",
]

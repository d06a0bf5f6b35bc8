"""Preset style catalog and the immutable generation request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

STYLE_PROMPTS: dict[str, str] = {
    "minimal": (
        "A high-quality, minimalist profile picture for a programmer. A stylized character, "
        "from the shoulders up, against a simple, clean, abstract background with subtle "
        "glowing lines. The style is flat digital art, vector-like, with a limited color "
        "palette of dark blue, purple, and neon cyan. The character has a confident and "
        "focused expression. The image is circular and perfect for a social media avatar."
    ),
    "creative": (
        "An artistic and creative profile picture for a programmer. A digital illustration "
        "of a person wearing headphones, sitting in a cozy, dimly lit room, with the soft "
        "glow of a laptop screen illuminating their face. The style is a beautiful digital "
        "painting with a warm, aesthetic color palette, soft focus, and a comfortable, "
        "relaxed mood. Ideal for a personal brand."
    ),
    "futuristic": (
        "A futuristic and high-tech profile picture for a developer. The subject is a "
        "stylized person with subtle glowing circuit board patterns overlaying their skin. "
        "The background is a swirling network of glowing binary code and abstract data "
        "lines. The color scheme is a dynamic mix of electric blue, vibrant green, and deep "
        "black. The style is cyberpunk and sci-fi-inspired, perfect for a tech-savvy profile."
    ),
}

STYLE_LABELS: dict[str, str] = {
    "minimal": "Minimal Style",
    "creative": "Creative Style",
    "futuristic": "Futuristic Style",
}


class UnknownStyleError(ValueError):
    """Raised when a style name is not in the catalog."""

    pass


def list_styles() -> list[str]:
    """Return the style names in display order."""
    return list(STYLE_PROMPTS)


def get_style_prompt(style_name: str) -> str:
    """Look up the prompt text for a style.

    Args:
        style_name: One of ``minimal``, ``creative`` or ``futuristic``

    Returns:
        The literal prompt text

    Raises:
        UnknownStyleError: If the style is not in the catalog
    """
    try:
        return STYLE_PROMPTS[style_name]
    except KeyError:
        raise UnknownStyleError(
            f"Unknown style '{style_name}', expected one of: {', '.join(STYLE_PROMPTS)}"
        ) from None


@dataclass(frozen=True)
class GenerationRequest:
    """A single image generation request.

    Attributes:
        prompt: Text prompt sent to the image API
    """

    prompt: str

    def __post_init__(self) -> None:
        if not self.prompt or not self.prompt.strip():
            raise ValueError("Prompt cannot be empty")

    @classmethod
    def from_style(cls, style_name: str) -> GenerationRequest:
        """Build a request from a catalog style name."""
        return cls(prompt=get_style_prompt(style_name))

    def to_payload(self, sample_count: int = 1) -> dict[str, Any]:
        """Build the JSON body for the predict endpoint."""
        return {
            "instances": {"prompt": self.prompt},
            "parameters": {"sampleCount": sample_count},
        }

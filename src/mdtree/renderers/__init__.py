from .base import HeaderWeight, Renderer, header_weight
from .text import TextRenderer

__all__ = [
    "HeaderWeight",
    "Renderer",
    "TextRenderer",
    "header_weight",
]

"""Placeholder substitution for layout HTML."""

from wren.templating.renderer import placeholder, render

__all__ = ["placeholder", "render"]

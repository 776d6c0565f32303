"""Renderers turning synthesized checks into target-language source."""

from .go_renderer import GoRenderer, check_identifier

__all__ = ["GoRenderer", "check_identifier"]

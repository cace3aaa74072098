"""Rendering contract. The matplotlib renderer lives in render.renderer_2d."""

from gravity_sandbox.render.base import DrawRecord, Renderer

__all__ = ["DrawRecord", "Renderer"]

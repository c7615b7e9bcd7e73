"""
Font engines driven by the harness.
"""

from sfntcheck.engine.base import DecodeBuffer, Engine, LoadGlyphOptions

__all__ = ["DecodeBuffer", "Engine", "LoadGlyphOptions"]

"""
Exception hierarchy for the harness and the engines it drives.
"""


class SfntCheckError(Exception):
    """Base class for all harness errors."""


class AssetUnavailableError(SfntCheckError):
    """A font asset could not be read from its configured directory."""

    def __init__(self, message: str, hint: str):
        super().__init__(f"{message}\n{hint}")
        self.hint = hint


class EngineError(SfntCheckError):
    """Base class for failures reported by a font engine."""


class ParseError(EngineError):
    """Raw font bytes could not be parsed."""


class NameLookupError(EngineError):
    """A name table string could not be read."""


class GlyphLoadError(EngineError):
    """A glyph outline could not be loaded."""


class GlyphLookupError(EngineError):
    """A codepoint could not be resolved to a glyph index."""


class KerningLookupError(EngineError):
    """A kerning adjustment could not be read."""

"""
Font I/O: resolving proprietary font files to raw bytes.
"""

from pathlib import Path

from sfntcheck.config.settings import HarnessConfig, remediation_hint
from sfntcheck.core.errors import AssetUnavailableError
from sfntcheck.core.types import Provider, QualifiedFontID


class FontLocator:
    """
    Resolves (provider, filename) pairs against the configured directories.

    Nothing is cached; every call re-reads the file.
    """

    def __init__(self, config: HarnessConfig):
        self.config = config

    def path_for(self, provider: Provider, filename: str) -> Path:
        """
        Return the full path of a font file.

        Raises:
            AssetUnavailableError: If the provider's directory is unset
        """
        directory = self.config.directory_for(provider)
        if directory is None:
            raise AssetUnavailableError(
                f"No directory configured for {provider.value} fonts",
                remediation_hint(provider, directory),
            )
        return directory / filename

    def resolve(self, provider: Provider, filename: str) -> bytes:
        """
        Read a font file.

        Args:
            provider: Publisher whose directory holds the file
            filename: File name within that directory

        Returns:
            Raw font bytes

        Raises:
            AssetUnavailableError: If the file cannot be read
        """
        path = self.path_for(provider, filename)
        try:
            return path.read_bytes()
        except OSError as e:
            raise AssetUnavailableError(
                f"Cannot read {path}: {e.strerror or e}",
                remediation_hint(provider, path.parent),
            ) from e

    def resolve_id(self, font_id: QualifiedFontID) -> bytes:
        return self.resolve(font_id.provider, font_id.filename)

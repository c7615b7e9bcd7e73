"""
Filesystem and environment constants for locating proprietary fonts.

Centralizes path definitions to avoid magic strings in individual modules.
"""

from pathlib import Path

# There is no default Adobe font directory on Debian:
# https://bugs.debian.org/cgi-bin/bugreport.cgi?bug=736680
#
# Get the fonts from https://github.com/adobe-fonts, e.g.:
#   - https://github.com/adobe-fonts/source-code-pro/releases/latest
#   - https://github.com/adobe-fonts/source-han-sans/releases/latest
#   - https://github.com/adobe-fonts/source-sans-pro/releases/latest
# and copy all of the TTF and OTF files into one directory.
DEFAULT_ADOBE_DIR: Path | None = None

# Installed by the Debian ttf-mscorefonts-installer package
DEFAULT_MICROSOFT_DIR: Path | None = Path("/usr/share/fonts/truetype/msttcorefonts")

# Environment variables read by HarnessConfig.from_env()
ENV_ENABLED = "SFNTCHECK_PROPRIETARY"
ENV_ADOBE_DIR = "SFNTCHECK_ADOBE_DIR"
ENV_MICROSOFT_DIR = "SFNTCHECK_MICROSOFT_DIR"

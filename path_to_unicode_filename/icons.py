"""
Icon characters used in encoded filenames.

Platform markers identify which OS convention produced an encoded filename.
Root icons stand for a well-known directory of that platform:

    🏠 home    🎵 Music      💾 AppData-equivalent   🔝 Desktop   📄 Documents
    ⏬ Downloads   🎨 Pictures   🎥 Videos   🥞 drive/volume

Every icon must have an explicit East Asian width so that doubled escape
characters stay visually and logically distinct from single ones.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from typing import Literal

__all__ = [
    'EXPLICIT_WIDTHS',
    'LINUX_ICON',
    'MAC_ICON',
    'MARKER_ICONS',
    'ROOT_ICONS',
    'SUBDIRECTORY_KINDS',
    'WINDOWS_ICON',
    'RootKind',
    'SubdirectoryKind',
    'has_explicit_width',
]

MAC_ICON = '🍎'
LINUX_ICON = '🐧'
WINDOWS_ICON = '💠'

MARKER_ICONS = (MAC_ICON, LINUX_ICON, WINDOWS_ICON)

type SubdirectoryKind = Literal['music', 'app_data', 'desktop', 'documents', 'downloads', 'pictures', 'videos']
type RootKind = Literal['home', 'music', 'app_data', 'desktop', 'documents', 'downloads', 'pictures', 'videos', 'drive']

# Matching order for the encode direction (first match wins)
SUBDIRECTORY_KINDS: tuple[SubdirectoryKind, ...] = (
    'music',
    'app_data',
    'desktop',
    'documents',
    'downloads',
    'pictures',
    'videos',
)

# Insertion order is the decode-direction matching order
ROOT_ICONS: Mapping[RootKind, str] = {
    'home': '🏠',
    'music': '🎵',
    'app_data': '💾',
    'desktop': '🔝',
    'documents': '📄',
    'downloads': '⏬',
    'pictures': '🎨',
    'videos': '🎥',
    'drive': '🥞',
}

# Ambiguous ('A') and neutral ('N') widths depend on the rendering context
EXPLICIT_WIDTHS = frozenset({'Na', 'W', 'H', 'F'})


def has_explicit_width(char: str) -> bool:
    """Return True if the character has a fixed East Asian width."""
    return unicodedata.east_asian_width(char) in EXPLICIT_WIDTHS

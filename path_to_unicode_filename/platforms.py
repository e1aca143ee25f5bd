"""
Platform descriptors for the three supported path conventions.

Each platform knows how to format and recognize its home directory and its
drive/volume directory, and the names of seven well-known subdirectories of
home:

    Platform  Marker  Home             Drive           AppData-equivalent
    macOS     🍎      /Users/<user>    /Volumes/<vol>  Library/Application Support
    Linux     🐧      /home/<user>     /media/<vol>    .local/share
    Windows   💠      C:\\Users\\<user>  <letter>:       AppData\\Local

Platforms are stateless. PLATFORMS fixes the priority order used wherever a
path could match more than one convention.
"""

from __future__ import annotations

import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass

from path_to_unicode_filename.icons import (
    LINUX_ICON,
    MAC_ICON,
    SUBDIRECTORY_KINDS,
    WINDOWS_ICON,
    SubdirectoryKind,
)

__all__ = [
    'LINUX',
    'MAC',
    'PLATFORMS',
    'WINDOWS',
    'Platform',
    'PosixPlatform',
    'WindowsPlatform',
    'platform_for_marker',
]

POSIX_SEP = '/'
WINDOWS_SEP = '\\'

# Letters plus letter-like numerals such as roman numerals (Nl)
DRIVE_LETTER_CATEGORIES = frozenset({'Lu', 'Ll', 'Lt', 'Lm', 'Lo', 'Nl'})


@dataclass(frozen=True, kw_only=True)
class Platform(ABC):
    """One OS path convention."""

    name: str
    marker: str
    separator: str
    app_data_dir: str
    music_dir: str = 'Music'
    desktop_dir: str = 'Desktop'
    documents_dir: str = 'Documents'
    downloads_dir: str = 'Downloads'
    pictures_dir: str = 'Pictures'
    videos_dir: str = 'Videos'

    @abstractmethod
    def format_home(self, user: str) -> str:
        """Native home directory path of user."""

    @abstractmethod
    def match_home(self, text: str) -> tuple[str, str] | None:
        """Recognize a home directory at the start of text: (user, rest) or None."""

    @abstractmethod
    def format_drive(self, volume: str) -> str:
        """Native path of a drive or mounted volume."""

    @abstractmethod
    def match_drive(self, text: str) -> tuple[str, str] | None:
        """Recognize a drive/volume at the start of text: (volume, rest) or None."""

    def subdirectory(self, kind: SubdirectoryKind) -> str:
        return getattr(self, f'{kind}_dir')

    def subdirectories(self) -> list[tuple[SubdirectoryKind, str]]:
        """Well-known subdirectories of home in matching order."""
        return [(kind, self.subdirectory(kind)) for kind in SUBDIRECTORY_KINDS]

    def _match_component(self, text: str, prefix: str) -> tuple[str, str] | None:
        """Match prefix followed by a non-empty component ending at a separator or end of text."""
        if not text.startswith(prefix):
            return None
        rest = text[len(prefix) :]
        end = rest.find(self.separator)
        if end == -1:
            end = len(rest)
        if end == 0:
            return None
        return rest[:end], rest[end:]


@dataclass(frozen=True, kw_only=True)
class PosixPlatform(Platform):
    """Platform whose home and volume directories are fixed prefixes under the root."""

    home_root: str
    drive_root: str
    separator: str = POSIX_SEP

    def format_home(self, user: str) -> str:
        return self.home_root + user

    def match_home(self, text: str) -> tuple[str, str] | None:
        return self._match_component(text, self.home_root)

    def format_drive(self, volume: str) -> str:
        return self.drive_root + volume

    def match_drive(self, text: str) -> tuple[str, str] | None:
        return self._match_component(text, self.drive_root)


@dataclass(frozen=True, kw_only=True)
class WindowsPlatform(Platform):
    """
    Windows convention: drive letters and profiles under C:\\Users.

    The drive letter is kept exactly as written; 'c:' and 'C:' are different
    drives as far as encoding is concerned. A drive is only recognized when
    followed by the separator or the end of the path.
    """

    home_root: str
    separator: str = WINDOWS_SEP

    def format_home(self, user: str) -> str:
        return self.home_root + user

    def match_home(self, text: str) -> tuple[str, str] | None:
        return self._match_component(text, self.home_root)

    def format_drive(self, volume: str) -> str:
        return volume + ':'

    def match_drive(self, text: str) -> tuple[str, str] | None:
        """Letter + ':' at the root; drive-relative forms like 'C:foo' are not drives."""
        if len(text) < 2 or unicodedata.category(text[0]) not in DRIVE_LETTER_CATEGORIES or text[1] != ':':
            return None
        rest = text[2:]
        if rest and not rest.startswith(self.separator):
            return None
        return text[0], rest


MAC = PosixPlatform(
    name='mac',
    marker=MAC_ICON,
    home_root='/Users/',
    drive_root='/Volumes/',
    app_data_dir='Library/Application Support',
)

LINUX = PosixPlatform(
    name='linux',
    marker=LINUX_ICON,
    home_root='/home/',
    drive_root='/media/',
    app_data_dir='.local/share',
)

WINDOWS = WindowsPlatform(
    name='windows',
    marker=WINDOWS_ICON,
    home_root='C:\\Users\\',
    app_data_dir='AppData\\Local',
)

# Priority order
PLATFORMS: tuple[Platform, ...] = (MAC, LINUX, WINDOWS)

_BY_MARKER = {platform.marker: platform for platform in PLATFORMS}


def platform_for_marker(char: str) -> Platform | None:
    """Return the platform identified by a marker icon, or None."""
    return _BY_MARKER.get(char)

"""
Prefix grammar for well-known directories.

Encode direction (native path → icon form):

    /Users/alice/Documents/report.txt
    └─────────┬──────────┘
          🍎 📄 alice          + escaped remainder "／report.txt"

Decode direction (icon form → native path) is the mirror image. Matching is
a small hand-written recursive descent over ordered alternatives; each rule
returns the recognized value and the unconsumed remainder, or None.
"""

from __future__ import annotations

from dataclasses import dataclass

from path_to_unicode_filename.escaping import ESCAPER, Escaper
from path_to_unicode_filename.exceptions import PrefixGrammarError
from path_to_unicode_filename.icons import ROOT_ICONS, RootKind
from path_to_unicode_filename.platforms import PLATFORMS, Platform, platform_for_marker

__all__ = [
    'WELL_KNOWN_ROOT_RULE',
    'WellKnownRoot',
    'parse_filename_prefix',
    'parse_path_prefix',
    'render_filename_prefix',
    'render_path_prefix',
    'sniff_path_platform',
]

WELL_KNOWN_ROOT_RULE = 'well_known_root'


@dataclass(frozen=True)
class WellKnownRoot:
    """A recognized path prefix: kind of root plus the user or volume name (unescaped)."""

    kind: RootKind
    name: str

    @property
    def icon(self) -> str:
        return ROOT_ICONS[self.kind]


# ==============================================================================
# Encode direction
# ==============================================================================


def sniff_path_platform(path: str) -> Platform | None:
    """
    Find the platform whose home or drive convention starts path, without consuming.

    Platforms are tried in priority order, home before drive within each.
    """
    for platform in PLATFORMS:
        if platform.match_home(path) is not None or platform.match_drive(path) is not None:
            return platform
    return None


def _match_subdirectory(platform: Platform, name: str, text: str) -> str | None:
    """Match separator + name followed by a separator or end of text; the trailing separator is not consumed."""
    head = platform.separator + name
    if not text.startswith(head):
        return None
    rest = text[len(head) :]
    if rest and not rest.startswith(platform.separator):
        return None
    return rest


def parse_path_prefix(platform: Platform, path: str) -> tuple[WellKnownRoot, str] | None:
    """
    Consume the well-known root at the start of a native path.

    Home wins over drive. Under home, the first matching subdirectory wins;
    otherwise only the home directory itself is consumed.

    Returns:
        (root, unconsumed rest of path), or None if platform does not match
    """
    home = platform.match_home(path)
    if home is not None:
        user, rest = home
        for kind, name in platform.subdirectories():
            tail = _match_subdirectory(platform, name, rest)
            if tail is not None:
                return WellKnownRoot(kind, user), tail
        return WellKnownRoot('home', user), rest

    drive = platform.match_drive(path)
    if drive is not None:
        volume, rest = drive
        return WellKnownRoot('drive', volume), rest

    return None


def render_filename_prefix(platform: Platform, root: WellKnownRoot, escaper: Escaper = ESCAPER) -> str:
    """Icon form: platform marker + root icon + escaped name."""
    return platform.marker + root.icon + escaper.escape(root.name)


# ==============================================================================
# Decode direction
# ==============================================================================


def parse_filename_prefix(filename: str, escaper: Escaper = ESCAPER) -> tuple[Platform, WellKnownRoot, str] | None:
    """
    Consume a platform marker and the well-known root icon form that follows it.

    Args:
        filename: Encoded filename
        escaper: Escape table used to decode the user or volume name

    Returns:
        (platform, root, unconsumed rest), or None if filename has no marker

    Raises:
        PrefixGrammarError: If a marker is present but no root icon form follows
    """
    platform = platform_for_marker(filename[:1])
    if platform is None:
        return None

    rest = filename[1:]
    for kind, icon in ROOT_ICONS.items():
        if rest.startswith(icon):
            name, tail = escaper.unescape_path_component(rest[len(icon) :], platform.separator)
            return platform, WellKnownRoot(kind, name), tail

    raise PrefixGrammarError(rest, WELL_KNOWN_ROOT_RULE)


def render_path_prefix(platform: Platform, root: WellKnownRoot) -> str:
    """Native form of a well-known root on platform."""
    if root.kind == 'home':
        return platform.format_home(root.name)
    if root.kind == 'drive':
        return platform.format_drive(root.name)
    return platform.format_home(root.name) + platform.separator + platform.subdirectory(root.kind)

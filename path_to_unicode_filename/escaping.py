"""
Character escaping for filename-safe path encoding.

Reserved characters are replaced by full width (or otherwise lookalike)
alternatives:

    \\0 → 〇    \\ → ＼    / → ／    : → ：    * → ＊    ? → ？
    "  → ＂    <  → ＜    > → ＞    | → ｜    🍎 → 🍏   🐧 → 🐤   💠 → 🚪

Any replacement character that occurs literally in the input is doubled
(〇 → 〇〇), so unescaping can always tell a literal occurrence from an
escaped one by reading two characters ahead.

Platform marker icons are escape targets, so an unescaped marker never
appears in escaped text. The decoder relies on this to recognize prefixes.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from path_to_unicode_filename.icons import (
    LINUX_ICON,
    MAC_ICON,
    MARKER_ICONS,
    ROOT_ICONS,
    WINDOWS_ICON,
    has_explicit_width,
)

__all__ = [
    'ESCAPED_CHARS',
    'ESCAPER',
    'ESCAPE_TARGET_CHARS',
    'Escaper',
    'escape',
    'unescape',
    'unescape_path_component',
]

ESCAPE_TARGET_CHARS = '\0\\/:*?"<>|' + MAC_ICON + LINUX_ICON + WINDOWS_ICON
ESCAPED_CHARS = '〇＼／：＊？＂＜＞｜🍏🐤🚪'


class Escaper:
    """
    Immutable bidirectional escape table.

    Built from two parallel strings: characters to escape and their
    replacements. Each replacement also maps its doubled form back to itself.
    """

    def __init__(self, targets: str = ESCAPE_TARGET_CHARS, escaped: str = ESCAPED_CHARS) -> None:
        """
        Build and validate the escape table.

        Args:
            targets: Characters that must not appear in an encoded filename
            escaped: Replacement for each target, position by position

        Raises:
            ValueError: If the strings differ in length, the mapping is not
                injective, or a replacement lacks an explicit display width
        """
        if len(targets) != len(escaped):
            raise ValueError(f'Escape table arity mismatch: {len(targets)} targets, {len(escaped)} replacements')

        escaping: dict[str, str] = {}
        unescaping: dict[str, str] = {}
        for target, replacement in zip(targets, escaped, strict=True):
            escaping[target] = replacement
            unescaping[replacement] = target
        for replacement in escaped:
            escaping[replacement] = replacement * 2
            unescaping[replacement * 2] = replacement

        if len(escaping) != 2 * len(targets) or len(unescaping) != 2 * len(targets):
            raise ValueError('Escape table is not injective (duplicate or overlapping characters)')

        for char in escaped:
            if not has_explicit_width(char):
                raise ValueError(f'Escape character {char!r} has no explicit East Asian width')

        self._escaping: Mapping[str, str] = MappingProxyType(escaping)
        self._unescaping: Mapping[str, str] = MappingProxyType(unescaping)

    @property
    def escaping_map(self) -> Mapping[str, str]:
        return self._escaping

    @property
    def unescaping_map(self) -> Mapping[str, str]:
        return self._unescaping

    def escape(self, text: str) -> str:
        """Replace every reserved character and double every literal replacement character."""
        return ''.join(self._escaping.get(char, char) for char in text)

    def unescape(self, text: str) -> str:
        """Inverse of escape(). Never fails: unknown characters pass through."""
        decoded, _ = self.scan(text)
        return decoded

    def unescape_path_component(self, text: str, separator: str) -> tuple[str, str]:
        """
        Unescape up to (not including) the first unit that decodes to separator.

        In escaped text the separator itself only occurs as its replacement
        (／ or ＼), so this stops at a native path boundary. A doubled
        replacement (＼＼) decodes to the literal full width character and
        does not stop the scan.

        Args:
            text: Escaped text
            separator: Native path separator of the platform being decoded

        Returns:
            (decoded component, unconsumed escaped text)
        """
        return self.scan(text, stop_at=separator)

    def scan(self, text: str, stop_at: str | None = None) -> tuple[str, str]:
        """
        Greedy decode loop: two characters if they form an escape, else one.

        Args:
            text: Escaped text
            stop_at: Halt before a unit whose decoded value equals this

        Returns:
            (decoded text, unconsumed escaped text)
        """
        parts: list[str] = []
        pos = 0
        while pos < len(text):
            pair = text[pos : pos + 2]
            if len(pair) == 2 and pair in self._unescaping:
                decoded, width = self._unescaping[pair], 2
            else:
                char = text[pos]
                decoded, width = self._unescaping.get(char, char), 1
            if stop_at is not None and decoded == stop_at:
                break
            parts.append(decoded)
            pos += width
        return ''.join(parts), text[pos:]


def _check_icons() -> None:
    """Icons share the output alphabet with the escape table."""
    for icon in (*MARKER_ICONS, *ROOT_ICONS.values()):
        if not has_explicit_width(icon):
            raise ValueError(f'Icon {icon!r} has no explicit East Asian width')
    for icon in ROOT_ICONS.values():
        if icon in ESCAPE_TARGET_CHARS or icon in ESCAPED_CHARS:
            raise ValueError(f'Root icon {icon!r} collides with the escape table')


_check_icons()

# Module-level singleton (read-only after construction)
ESCAPER = Escaper()


def escape(text: str) -> str:
    return ESCAPER.escape(text)


def unescape(text: str) -> str:
    return ESCAPER.unescape(text)


def unescape_path_component(text: str, separator: str) -> tuple[str, str]:
    return ESCAPER.unescape_path_component(text, separator)

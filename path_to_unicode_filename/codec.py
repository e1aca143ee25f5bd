"""
Path ↔ filename conversion.

    >>> to_filename('/tmp/file.txt')
    '／tmp／file.txt'
    >>> to_filename('C:\\\\Users\\\\alice\\\\file.txt')
    '💠🏠alice＼file.txt'
    >>> to_filename('/Users/alice/Documents/file.txt')
    '🍎📄alice／file.txt'
    >>> to_path('🐧🥞disk001／file.txt')
    '/media/disk001/file.txt'

to_filename() and to_path() accept text, bytes or path-like objects. The
*_from_str variants take text only and skip byte validation.
"""

from __future__ import annotations

import logging
import os

from path_to_unicode_filename.escaping import ESCAPER
from path_to_unicode_filename.exceptions import ByteDecodingError, IncompleteInputError
from path_to_unicode_filename.grammar import (
    parse_filename_prefix,
    parse_path_prefix,
    render_filename_prefix,
    render_path_prefix,
    sniff_path_platform,
)

__all__ = [
    'decode',
    'encode',
    'to_filename',
    'to_filename_from_str',
    'to_path',
    'to_path_from_str',
]

logger = logging.getLogger(__name__)

type PathInput = str | bytes | os.PathLike[str] | os.PathLike[bytes]


def _to_text(value: PathInput) -> str:
    """
    Return value as text, failing on anything that is not valid UTF-8.

    A str produced by os.fsdecode() from undecodable bytes carries lone
    surrogates; it is rejected with the original bytes.

    Raises:
        ByteDecodingError: With the raw bytes that could not be decoded
    """
    raw = os.fspath(value)
    if isinstance(raw, bytes):
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError:
            raise ByteDecodingError(raw) from None

    try:
        raw.encode('utf-8')
    except UnicodeEncodeError:
        raise ByteDecodingError(_surrogates_to_bytes(raw)) from None
    return raw


def _surrogates_to_bytes(text: str) -> bytes:
    """Recover raw bytes from a str holding lone surrogates."""
    try:
        return os.fsencode(text)
    except UnicodeEncodeError:
        # Surrogates outside the surrogateescape range (U+DC80..U+DCFF)
        return text.encode('utf-8', 'surrogatepass')


def to_filename_from_str(path: str) -> str:
    """
    Encode a native path as a single filename component.

    Never fails. A recognized home, well-known subdirectory or drive prefix
    is rewritten to platform marker + root icon + escaped name; everything
    else is escaped character by character.
    """
    platform = sniff_path_platform(path)
    parsed = parse_path_prefix(platform, path) if platform is not None else None
    if platform is None or parsed is None:
        return ESCAPER.escape(path)

    root, rest = parsed
    logger.debug(f'Encoding {root.kind} root of {platform.name} path: {path!r}')
    return render_filename_prefix(platform, root) + ESCAPER.escape(rest)


def to_path_from_str(filename: str) -> str:
    """
    Decode a filename produced by to_filename_from_str() back into the native path.

    Raises:
        PrefixGrammarError: If the filename starts with a platform marker that
            is not followed by a well-known root icon
        IncompleteInputError: If the decoder stops before the end of filename
    """
    prefix = ''
    rest = filename
    parsed = parse_filename_prefix(filename)
    if parsed is not None:
        platform, root, rest = parsed
        logger.debug(f'Decoding {root.kind} root of {platform.name} filename: {filename!r}')
        prefix = render_path_prefix(platform, root)

    path, remainder = ESCAPER.scan(rest)
    if remainder:
        raise IncompleteInputError(remainder)
    return prefix + path


def to_filename(path: PathInput) -> str:
    """
    Encode a path (text, bytes or path-like) as a filename.

    Raises:
        ByteDecodingError: If the path is not valid UTF-8
    """
    return to_filename_from_str(_to_text(path))


def to_path(filename: PathInput) -> str:
    """
    Decode a filename (text, bytes or path-like) into the native path it encodes.

    The result is text; wrap it in the pathlib flavour of the encoded
    platform if a structured path is needed.

    Raises:
        ByteDecodingError: If the filename is not valid UTF-8
        PrefixGrammarError: If a platform marker has no valid continuation
    """
    return to_path_from_str(_to_text(filename))


encode = to_filename
decode = to_path

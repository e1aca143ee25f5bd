"""
Reversible encoding of file paths as unicode filenames.

Useful for storing data derived from a file (caches, features, thumbnails)
under a name that records where the file came from:

- \\ / : * ? " < > | become their full width alternatives
- U+0000 becomes 〇
- home, Documents, Pictures, etc. become an OS icon (🍎, 🐧, 💠) plus a
  directory icon (🏠, 📄, 🎨, ...)
- replacement characters found in the input are doubled
"""

from __future__ import annotations

from path_to_unicode_filename.codec import (
    decode,
    encode,
    to_filename,
    to_filename_from_str,
    to_path,
    to_path_from_str,
)
from path_to_unicode_filename.escaping import escape, unescape, unescape_path_component
from path_to_unicode_filename.exceptions import (
    ByteDecodingError,
    IncompleteInputError,
    PrefixGrammarError,
    UnicodeFilenameError,
)

__all__ = [
    'ByteDecodingError',
    'IncompleteInputError',
    'PrefixGrammarError',
    'UnicodeFilenameError',
    'decode',
    'encode',
    'escape',
    'to_filename',
    'to_filename_from_str',
    'to_path',
    'to_path_from_str',
    'unescape',
    'unescape_path_component',
]

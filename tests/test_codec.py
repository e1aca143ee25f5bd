"""
Tests for path ↔ filename conversion.

CONVERSIONS pairs each native path with its encoded filename; both
directions are checked for every pair.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path, PurePosixPath

import pytest

from path_to_unicode_filename import (
    ByteDecodingError,
    IncompleteInputError,
    PrefixGrammarError,
    UnicodeFilenameError,
    decode,
    encode,
    escape,
    to_filename,
    to_filename_from_str,
    to_path,
    to_path_from_str,
)
from path_to_unicode_filename.platforms import PLATFORMS, Platform

CONVERSIONS = [
    ('/', '／'),
    ('🍎', '🍏'),
    ('/tmp', '／tmp'),
    ('/tmp/file.txt', '／tmp／file.txt'),
    ('/media/disk001/file.txt', '🐧🥞disk001／file.txt'),
    ('C:\\file.txt', '💠🥞C＼file.txt'),
    ('C:\\Users\\alice\\file.txt', '💠🏠alice＼file.txt'),
    ('C:\\Users\\alice\\Music\\file.mp3', '💠🎵alice＼file.mp3'),
    ('/Users/alice/Library/Application Support', '🍎💾alice'),
    ('/home/alice/Desktop/', '🐧🔝alice／'),
    ('/home/alice/Documents/file.doc', '🐧📄alice／file.doc'),
    ('/Users/alice/Documents/file.txt', '🍎📄alice／file.txt'),
    ('/Users/alice/Downloads/file.txt', '🍎⏬alice／file.txt'),
    ('C:\\Users\\alice\\Pictures\\file.jpg', '💠🎨alice＼file.jpg'),
    ('/home/alice/Videos/file.mp4', '🐧🎥alice／file.mp4'),
    ('/Volumes/disk001/file.txt', '🍎🥞disk001／file.txt'),
    ('platform_icon_🍎_test', 'platform_icon_🍏_test'),
    ('platform_icon_🐧_test', 'platform_icon_🐤_test'),
    ('platform_icon_💠_test', 'platform_icon_🚪_test'),
    ('all_escape_targets_\0\\/:*?"<>|🍎🐧💠_test', 'all_escape_targets_〇＼／：＊？＂＜＞｜🍏🐤🚪_test'),
    (
        'all_escape_escaped_chars_〇＼／：＊？＂＜＞｜🍏🐤🚪_test',
        'all_escape_escaped_chars_〇〇＼＼／／：：＊＊？？＂＂＜＜＞＞｜｜🍏🍏🐤🐤🚪🚪_test',
    ),
    ('/Volumes/disk🍎001/file.txt', '🍎🥞disk🍏001／file.txt'),
    ('/Volumes/disk🐤001/file.txt', '🍎🥞disk🐤🐤001／file.txt'),
]


@pytest.mark.parametrize(('path', 'filename'), CONVERSIONS, ids=[repr(path) for path, _ in CONVERSIONS])
def test_to_filename(path: str, filename: str) -> None:
    assert to_filename(path) == filename


@pytest.mark.parametrize(('path', 'filename'), CONVERSIONS, ids=[repr(path) for path, _ in CONVERSIONS])
def test_to_path(path: str, filename: str) -> None:
    assert to_path(filename) == path


def test_encode_decode_aliases() -> None:
    assert encode is to_filename
    assert decode is to_path


def test_accepts_path_like_and_bytes() -> None:
    assert to_filename(PurePosixPath('/home/alice/Music/a.mp3')) == '🐧🎵alice／a.mp3'
    assert to_filename(b'/media/usb/x') == '🐧🥞usb／x'
    assert to_path('🐧🥞usb／x'.encode()) == '/media/usb/x'
    assert to_path(Path('🍏')) == '🍎'


def test_windows_drive_letter_case_is_preserved() -> None:
    assert to_filename('c:\\x') == '💠🥞c＼x'
    assert to_path('💠🥞c＼x') == 'c:\\x'


def test_home_directory_alone() -> None:
    assert to_filename('/Users/alice') == '🍎🏠alice'
    assert to_path('🍎🏠alice') == '/Users/alice'


def test_unrecognized_subdirectory_stays_in_remainder() -> None:
    assert to_filename('/home/alice/Musicals/a') == '🐧🏠alice／Musicals／a'


def test_marker_without_root_is_an_error() -> None:
    with pytest.raises(PrefixGrammarError) as exc_info:
        to_path('🍎invalid')
    assert exc_info.value.remainder == 'invalid'
    assert exc_info.value.rule == 'well_known_root'
    assert isinstance(exc_info.value, UnicodeFilenameError)


def test_marker_alone_is_an_error() -> None:
    with pytest.raises(PrefixGrammarError) as exc_info:
        to_path_from_str('💠')
    assert exc_info.value.remainder == ''


@pytest.mark.parametrize(
    'text',
    ['🍎invalid', '🐧🏠alice', '💠🥞C', 'a/b\\c', '〇＼／：＊？＂＜＞｜', '🍏🐤🚪 and 🍎🐧💠'],
    ids=repr,
)
def test_escaped_plain_text_never_parses_as_prefix(text: str) -> None:
    assert to_path(escape(text)) == text


def _round_trip_paths() -> list[str]:
    """Paths built from each platform's home, subdirectory and drive conventions."""
    paths = []
    for platform in PLATFORMS:
        sep = platform.separator
        home = platform.format_home('alice')
        tails = ['', sep, f'{sep}file.txt', f'{sep}a{sep}b c{sep}ｆｕｌｌ：ｗｉｄｔｈ', f'{sep}weird<>|?*"name']
        for tail in tails:
            paths.append(home + tail)
            paths.append(platform.format_drive('E' if platform.name == 'windows' else 'disk') + tail)
            for _, name in platform.subdirectories():
                paths.append(home + sep + name + tail)
    # Drive-relative Windows paths have no recognized prefix
    paths.extend(['C:foo', 'C:/foo', 'D:file.txt'])
    return paths


@pytest.mark.parametrize('path', _round_trip_paths(), ids=repr)
def test_round_trip(path: str) -> None:
    filename = to_filename(path)
    assert '/' not in filename
    assert '\\' not in filename
    assert to_path(filename) == path


@pytest.mark.parametrize('platform', PLATFORMS, ids=lambda platform: platform.name)
def test_recognized_paths_start_with_platform_marker(platform: Platform) -> None:
    assert to_filename(platform.format_home('bob')).startswith(platform.marker)


def test_incomplete_input_error_is_inspectable() -> None:
    error = IncompleteInputError('tail', needed=2)
    assert error.remainder == 'tail'
    assert error.needed == 2
    assert isinstance(error, UnicodeFilenameError)
    assert '2 more characters needed' in str(error)


def test_invalid_utf8_bytes() -> None:
    raw = bytes([0xC3, 0x28])
    with pytest.raises(ByteDecodingError) as exc_info:
        to_path(raw)
    assert exc_info.value.raw == raw

    with pytest.raises(ByteDecodingError) as exc_info:
        to_filename(raw)
    assert exc_info.value.raw == raw


@pytest.mark.skipif(sys.platform == 'win32', reason='POSIX filesystem encoding')
def test_invalid_utf8_surrogate_escaped_path() -> None:
    """os.fsdecode() keeps undecodable bytes as lone surrogates."""
    raw = bytes([0xC3, 0x28])
    with pytest.raises(ByteDecodingError) as exc_info:
        to_filename(Path(os.fsdecode(raw)))
    assert exc_info.value.raw == raw

    with pytest.raises(ByteDecodingError) as exc_info:
        to_path(os.fsdecode(raw))
    assert exc_info.value.raw == raw


@pytest.mark.parametrize(
    ('path', 'filename'),
    [('C:foo', 'C：foo'), ('C:/foo', 'C：／foo'), ('D:file.txt', 'D：file.txt')],
    ids=repr,
)
def test_drive_relative_path_is_escaped_literally(path: str, filename: str) -> None:
    assert to_filename(path) == filename
    assert to_path(filename) == path


@pytest.mark.parametrize('text', ['\ud800abc', '\ud800', 'a\udfff'], ids=repr)
def test_lone_surrogate_outside_escape_range(text: str) -> None:
    raw = text.encode('utf-8', 'surrogatepass')
    with pytest.raises(ByteDecodingError) as exc_info:
        to_filename(text)
    assert exc_info.value.raw == raw

    with pytest.raises(ByteDecodingError) as exc_info:
        to_path(text)
    assert exc_info.value.raw == raw


def test_to_filename_from_str_is_total() -> None:
    assert to_filename_from_str('') == ''
    assert to_path_from_str('') == ''

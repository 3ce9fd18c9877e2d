"""Unit tests for path normalisation in helperkit.domain.files.filesystem."""

import pytest

from helperkit.domain.files import filesystem


@pytest.mark.parametrize(
    ("path", "separator", "expected"),
    [
        ("a//b/./c", "/", "a/b/c"),
        ("a\\b//c", "/", "a/b/c"),
        ("/var/log/", "\\", "\\var\\log\\"),
        ("\\\\server\\share//dir", "\\", "\\\\server\\share\\dir"),
    ],
)
def test_format_path(path, separator, expected):
    assert filesystem.format_path(path, separator) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/var/log/app.log", "/var/log/"),
        ("/var/log/", "/var/log/"),
        ("app.log", "./"),
        ("/app.log", "/"),
    ],
)
def test_dirname(path, expected):
    assert filesystem.dirname(path, "/") == expected

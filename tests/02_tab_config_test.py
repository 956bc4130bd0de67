#!/usr/bin/env python
# encoding: utf-8

# pylint: disable=missing-class-docstring, missing-function-docstring, invalid-name, missing-module-docstring

import pytest

from tabfile import TabConfig, TabConfigException, TabFile


class CsvFile:
    SEPARATOR = ","
    COMMENTS = None
    SKIP_LINES = 1
    SKIP_EMPTY_LINES = False
    ENCODING = "latin-1"


class PartialFile:
    SEPARATOR = ";"


def test_defaults():
    config = TabConfig()
    assert config.separator == "\t"
    assert config.comment_character == "#"
    assert config.skip_lines == 0
    assert config.skip_empty_lines is True
    assert config.encoding == "utf-8"
    assert config.separator_width == 1

    assert TabConfig.from_filespec(None) == config


def test_from_filespec():
    config = TabConfig.from_filespec(CsvFile)
    assert config.separator == ","
    assert config.comment_character is None
    assert config.skip_lines == 1
    assert config.skip_empty_lines is False
    assert config.encoding == "latin-1"

    # Objects are fine as well
    assert TabConfig.from_filespec(CsvFile()) == config

    config = TabConfig.from_filespec(PartialFile)
    assert config.separator == ";"
    assert config.comment_character == "#"
    assert config.skip_lines == 0


def test_from_filespec_overrides():
    config = TabConfig.from_filespec(CsvFile, separator="|", skip_lines=None)
    assert config.separator == "|"
    assert config.skip_lines == 1

    config = TabConfig.from_filespec(PartialFile, comments="%")
    assert config.comment_character == "%"

    config = TabConfig.from_filespec(PartialFile, comments="")
    assert config.comment_character is None

    config = TabConfig.from_filespec(PartialFile, comments=None)
    assert config.comment_character == "#"

    config = TabConfig.from_filespec(TabConfig(separator=","), skip_lines=3)
    assert config.separator == ","
    assert config.skip_lines == 3


def test_copy():
    config = TabConfig(separator=",", skip_lines=2)
    clone = config.copy()
    assert clone == config
    assert clone is not config

    clone.skip_lines = 5
    assert config.skip_lines == 2


def test_multi_byte_separator():
    config = TabConfig(separator="→")
    assert config.separator_width == 3


@pytest.mark.parametrize("sep", ["", ",,", "\n", "\r", None, 9])
def test_invalid_separator(sep):
    with pytest.raises(TabConfigException):
        TabConfig(separator=sep)


def test_invalid_values():
    with pytest.raises(TabConfigException):
        TabConfig(comment_character="//")

    with pytest.raises(TabConfigException):
        TabConfig(skip_lines=-1)

    with pytest.raises(TabConfigException):
        TabConfig(skip_lines="1")

    with pytest.raises(TabConfigException):
        TabConfig(encoding="no-such-encoding")

    # It is a ValueError as well
    with pytest.raises(ValueError):
        TabConfig(skip_lines=-1)


@pytest.mark.parametrize("encoding", ["utf-16", "utf-16-le", "utf-32", "utf-8-sig", "rot13"])
def test_encoding_not_ascii_compatible(encoding):
    # Lines are split on b"\n" before they are decoded
    with pytest.raises(TabConfigException):
        TabConfig(encoding=encoding)

    with pytest.raises(TabConfigException):
        TabFile.from_bytes("a\tb\n".encode("utf-16-le")).encoding(encoding)


def test_ascii_compatible_encodings():
    for encoding in ["utf-8", "latin-1", "cp1252", "ascii", None]:
        assert TabConfig(encoding=encoding).encoding == (encoding or "utf-8")


def test_repr():
    assert repr(TabConfig()) == (
        "TabConfig(separator='\\t', comment_character='#', skip_lines=0, "
        "skip_empty_lines=True, encoding='utf-8')")

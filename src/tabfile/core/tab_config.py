#!/usr/bin/env python
# encoding: utf-8

"""The configuration of a delimited text file, and how to derive it
from a filespec."""

import codecs
from typing import Any, Optional


class TabConfigException(ValueError):
    """ TabConfigException """


# Chars which terminate a line. They can not be used as separator.
LINE_TERMINATORS = ("\n", "\r")


class TabConfig:
    """The (plain value) configuration of a tab file.

    Similar to fixed-width filespecs, the config can be derived from any
    class or object providing some or all of the following properties:
    SEPARATOR, COMMENTS, SKIP_LINES, SKIP_EMPTY_LINES and ENCODING.
    Properties not provided fall back to the defaults.
    """

    def __init__(self,
        separator: str = "\t",
        comment_character: Optional[str] = "#",
        skip_lines: int = 0,
        skip_empty_lines: bool = True,
        encoding: str = "utf-8"):

        self.separator = validate_separator(separator)
        self.comment_character = validate_comment_character(comment_character)
        self.skip_lines = validate_skip_lines(skip_lines)
        self.skip_empty_lines = bool(skip_empty_lines)
        self.encoding = validate_encoding(encoding)


    @classmethod
    def from_filespec(cls, filespec: Any = None, **kwargs) -> 'TabConfig':
        """Create a config from the filespec provided. Keyword arguments
        which are not None take precedence over the filespec properties.
        """

        filespec = filespec() if isinstance(filespec, type) else filespec

        if isinstance(filespec, TabConfig):
            values = vars(filespec).copy()
        else:
            values = dict(
                separator = getattr(filespec, "SEPARATOR", "\t"),
                comment_character = getattr(filespec, "COMMENTS", "#"),
                skip_lines = getattr(filespec, "SKIP_LINES", 0),
                skip_empty_lines = getattr(filespec, "SKIP_EMPTY_LINES", True),
                encoding = getattr(filespec, "ENCODING", "utf-8"),
            )

        # 'comments' is the name used by tab_open() and fixed-width files
        if "comments" in kwargs:
            kwargs.setdefault("comment_character", kwargs.pop("comments"))

        values.update((k, v) for k, v in kwargs.items() if v is not None)
        return cls(**values)


    @property
    def separator_width(self) -> int:
        """The number of bytes the separator occupies in utf-8"""
        return len(self.separator.encode("utf-8"))


    def copy(self) -> 'TabConfig':
        """Create an independent copy"""
        return TabConfig(
            separator=self.separator,
            comment_character=self.comment_character,
            skip_lines=self.skip_lines,
            skip_empty_lines=self.skip_empty_lines,
            encoding=self.encoding)


    def __eq__(self, other) -> bool:
        if not isinstance(other, TabConfig):
            return NotImplemented

        return vars(self) == vars(other)


    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(separator={self.separator!r}, "
            f"comment_character={self.comment_character!r}, skip_lines={self.skip_lines}, "
            f"skip_empty_lines={self.skip_empty_lines}, encoding={self.encoding!r})")


def validate_separator(separator: str) -> str:
    """The separator must be exactly one char and not a newline char"""

    if not isinstance(separator, str) or len(separator) != 1:
        raise TabConfigException(f"'separator' must be a single char: {separator!r}")

    if separator in LINE_TERMINATORS:
        raise TabConfigException(f"'separator' must not be a line terminator: {separator!r}")

    return separator


def validate_comment_character(comment: Optional[str]) -> Optional[str]:
    """None or an empty string disable comment filtering. Otherwise exactly one char."""

    if comment is None or comment == "":
        return None

    if not isinstance(comment, str) or len(comment) != 1:
        raise TabConfigException(f"'comment_character' must be a single char or None: {comment!r}")

    return comment


def validate_encoding(encoding: Optional[str]) -> str:
    """Must be known to python's codecs, and encode newlines as single
    ascii bytes. Lines are split on the raw bytes before they are decoded,
    hence e.g. utf-16 is not supported. None means utf-8"""

    encoding = encoding or "utf-8"
    try:
        codecs.lookup(encoding)
        newlines = ["\n".encode(encoding), "\r".encode(encoding)]
    except LookupError as exc:
        raise TabConfigException(f"Unknown encoding: {encoding!r}") from exc

    if newlines != [b"\n", b"\r"]:
        raise TabConfigException(f"Encoding is not ascii compatible: {encoding!r}")

    return encoding


def validate_skip_lines(num_lines: int) -> int:
    """Must be a non-negative integer"""

    if isinstance(num_lines, bool) or not isinstance(num_lines, int):
        raise TabConfigException(f"'skip_lines' must be an integer: {num_lines!r}")

    if num_lines < 0:
        raise TabConfigException(f"'skip_lines' must be >= 0: {num_lines}")

    return num_lines

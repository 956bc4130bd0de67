#!/usr/bin/env python
# encoding: utf-8

"""Decide which raw lines of a file become records"""

from typing import Optional

from .tab_config import TabConfig


class TabLineFilter:
    """A stateful filter applied to every raw line, in file order.

    The first rule that matches wins:
        1. header lines: the first 'skip_lines' lines are dropped,
           whatever their content (comment, blank, ...)
        2. comment lines: the first char is the comment char
        3. blank lines: empty or only whitespace (if enabled)

    End-of-input is detected by the reader before a line is handed over.
    """

    def __init__(self, config: TabConfig):
        self.skip_lines: int = config.skip_lines
        self.comment_character: Optional[str] = config.comment_character
        self.skip_empty_lines: bool = config.skip_empty_lines

        # Some statistics
        self.header_lines = 0
        self.comment_lines = 0
        self.empty_lines = 0


    def is_header(self) -> bool:
        """True, while header lines remain to be skipped. Decrements the counter."""
        if self.skip_lines > 0:
            self.skip_lines -= 1
            self.header_lines += 1
            return True

        return False


    def is_comment(self, line: str) -> bool:
        """True, if comment filtering is active and the line starts with the comment char"""
        if self.comment_character is not None and line.startswith(self.comment_character):
            self.comment_lines += 1
            return True

        return False


    def is_empty(self, line: str) -> bool:
        """True, if blank lines are skipped and the line has nothing but whitespace.

        Whitespace is what str.strip() removes. That includes the ascii
        separators \\x1c to \\x1f, hence a line like "\\x1f\\x1f\\n" is blank.
        """
        if self.skip_empty_lines and not line.strip():
            self.empty_lines += 1
            return True

        return False


    def skip(self, line: str) -> bool:
        """True, if the line must not be emitted"""
        return self.is_header() or self.is_comment(line) or self.is_empty(line)


    def accept(self, line: str) -> bool:
        """True, if the line should be passed on as a record"""
        return not self.skip(line)


    @property
    def skipped(self) -> int:
        """Number of lines filtered so far"""
        return self.header_lines + self.comment_lines + self.empty_lines


    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(skip_lines={self.skip_lines}, "
            f"comment_character={self.comment_character!r}, skip_empty_lines={self.skip_empty_lines})")

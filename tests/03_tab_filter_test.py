#!/usr/bin/env python
# encoding: utf-8

# pylint: disable=missing-class-docstring, missing-function-docstring, invalid-name, missing-module-docstring

from tabfile import TabConfig, TabLineFilter


def test_defaults():
    lfilter = TabLineFilter(TabConfig())
    assert lfilter.accept("foo\tbar\n")
    assert not lfilter.accept("# comment\n")
    assert not lfilter.accept("\n")
    assert not lfilter.accept("  \t \r\n")
    assert not lfilter.accept("")
    # Only the first char counts
    assert lfilter.accept(" # not a comment\n")
    assert lfilter.accept("foo#bar\n")

    assert lfilter.comment_lines == 1
    assert lfilter.empty_lines == 3
    assert lfilter.header_lines == 0
    assert lfilter.skipped == 4


def test_header_lines_first():
    lfilter = TabLineFilter(TabConfig(skip_lines=3))
    # Header lines are skipped, whatever they look like
    assert lfilter.skip("#hdr1\n")
    assert lfilter.skip("\n")
    assert lfilter.skip("real\tline\n")
    assert lfilter.skip_lines == 0
    assert lfilter.header_lines == 3
    assert lfilter.comment_lines == 0
    assert lfilter.empty_lines == 0

    assert lfilter.accept("real\tline\n")
    assert not lfilter.accept("#comment\n")
    assert lfilter.comment_lines == 1


def test_no_comments():
    lfilter = TabLineFilter(TabConfig(comment_character=None))
    assert lfilter.accept("# no comment\n")


def test_other_comment_character():
    lfilter = TabLineFilter(TabConfig(comment_character="%"))
    assert lfilter.accept("# no comment\n")
    assert not lfilter.accept("% comment\n")
    assert not lfilter.accept("%")


def test_keep_empty_lines():
    lfilter = TabLineFilter(TabConfig(skip_empty_lines=False))
    assert lfilter.accept("\n")
    assert lfilter.accept("   \n")
    assert lfilter.accept("")


def test_unicode_whitespace():
    lfilter = TabLineFilter(TabConfig())
    assert not lfilter.accept("\u00a0\u2003\n")
    assert lfilter.accept("\u00a0x\n")


def test_comment_wins_over_separator():
    lfilter = TabLineFilter(TabConfig(separator="#", comment_character="#"))
    assert not lfilter.accept("#a#b\n")
    assert lfilter.accept("a#b\n")


def test_ascii_separators_are_whitespace():
    # str.strip() removes \x1c to \x1f as well
    lfilter = TabLineFilter(TabConfig(separator="\x1f"))
    assert not lfilter.accept("\x1f\x1f\n")
    assert lfilter.accept("a\x1f\x1f\n")

    lfilter = TabLineFilter(TabConfig(separator="\x1f", skip_empty_lines=False))
    assert lfilter.accept("\x1f\x1f\n")

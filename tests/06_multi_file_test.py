#!/usr/bin/env python
# encoding: utf-8

# pylint: disable=missing-class-docstring, missing-function-docstring, invalid-name, missing-module-docstring

import pytest

from tabfile import TabMultiFile, TabFileException, TabFileReadError
from tabfile import tab_open


DATA_1 = b"""name\tprofession
Dianne Mcintosh\tMedic
Rosalyn Clark\tComedian
"""

DATA_2 = b"""name\tprofession
# comment
Shirley Gray\tComedian
Georgia Frank\tComedian"""


class HumanFile:
    SKIP_LINES = 1


def test_multi_file():
    with TabMultiFile(HumanFile) as tabfile:
        tabfile.open_and_add(DATA_1)
        tabfile.open_and_add(DATA_2)
        assert len(tabfile.files) == 2

        records = list(tabfile)
        assert [x[0] for x in records] == ["Dianne Mcintosh", "Rosalyn Clark", "Shirley Gray", "Georgia Frank"]
        assert records[0].file == tabfile.files[0].file
        assert records[2].file == tabfile.files[1].file
        assert records[2].lineno == 2


def test_tab_open_list(tmp_path):
    file_1 = tmp_path / "humans_1.tsv"
    file_1.write_bytes(DATA_1)
    file_2 = tmp_path / "humans_2.tsv"
    file_2.write_bytes(DATA_2)

    with tab_open([file_1, [file_2]], HumanFile) as tabfile:
        assert isinstance(tabfile, TabMultiFile)
        records = list(tabfile)
        assert len(records) == 4
        assert records[0].file == str(file_1)
        assert records[-1].file == str(file_2)
        assert records[-1].line() == "Georgia Frank\tComedian"


def test_tab_open_nested_list():
    with tab_open([[DATA_1], [[DATA_2]]], HumanFile) as tabfile:
        assert len(tabfile.files) == 2
        assert len(list(tabfile)) == 4


def test_tab_open_list_missing_file(tmp_path):
    file_1 = tmp_path / "humans_1.tsv"
    file_1.write_bytes(DATA_1)

    with pytest.raises(FileNotFoundError):
        tab_open([file_1, tmp_path / "missing.tsv"])


def test_tuning_applies_to_all_files():
    tabfile = TabMultiFile()
    tabfile.open_and_add(b"a,b\n")
    tabfile.separator(",").skip_lines(0)
    tabfile.open_and_add(b"c,d\n")

    assert tabfile.config.separator == ","
    assert all(x.config.separator == "," for x in tabfile.files)
    assert [x.fields() for x in tabfile] == [["a", "b"], ["c", "d"]]


def test_errors_pass_through():
    tabfile = TabMultiFile()
    tabfile.open_and_add(b"a\n\xff\n")
    tabfile.open_and_add(b"b\n")
    items = list(tabfile)
    assert len(items) == 3
    assert isinstance(items[1], TabFileReadError)
    assert items[2].fields() == ["b"]


def test_consumed():
    tabfile = TabMultiFile()
    tabfile.open_and_add(b"a\n")
    assert list(tabfile)

    with pytest.raises(TabFileException):
        iter(tabfile)

    with pytest.raises(TabFileException):
        tabfile.separator(",")

    with pytest.raises(TabFileException):
        tabfile.open_and_add(b"b\n")

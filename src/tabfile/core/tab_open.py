#!/usr/bin/env python
# encoding: utf-8

from typing import Any, Optional, Union
from pathlib import Path

from .tab_file import TabFile
from .tab_multi_file import TabMultiFile


FilesType = Union[str, bytes, Path, list['FilesType']]

def tab_open(files: FilesType, filespec: Any = None, *,
    separator: Optional[str] = None,
    comments: Optional[str] = None,
    skip_lines: Optional[int] = None,
    skip_empty_lines: Optional[bool] = None,
    encoding: Optional[str] = None) -> TabFile|TabMultiFile:
    """Open a tab file (read-only) with the configuration provided.

    Arguments which are None fall back to the filespec, and then to the
    defaults. Use comments="" to disable comment filtering.
    """

    kwargs = dict(separator=separator, comments=comments, skip_lines=skip_lines,
        skip_empty_lines=skip_empty_lines, encoding=encoding)

    if not isinstance(files, list):
        return TabFile(filespec, **kwargs).open(files)

    tabfile = TabMultiFile(filespec, **kwargs)
    try:
        for file in _flatten(files):
            tabfile.open_and_add(file)
    except Exception:
        tabfile.close()
        raise

    return tabfile


def _flatten(mylist):
    for elem in mylist:
        if isinstance(elem, list):
            yield from _flatten(elem)
        else:
            yield elem

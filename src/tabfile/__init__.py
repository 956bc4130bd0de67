#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""A lib to read delimited (e.g. tab-separated) text files line by line.

key features:
    - Every line is returned as a record, which provides the original line
      and its fields. The fields are determined once, as byte ranges into
      the line. raw_fields() returns memoryviews on the line's data, without
      copying any bytes. fields() returns the same as strings.
    - Records are independent of the reader. Keep them as long as you need
      them, while the iteration continues.
    - Any single char may be the separator, default is tab. Multi-byte
      utf-8 chars are fine, e.g. '¦' or '→'.
    - Header lines can be skipped. They are always skipped, no matter
      whether they look like comments or are blank.
    - Comment lines, starting with a comment char (default: '#'), and blank
      lines are skipped, unless configured otherwise.
    - "\\n", "\\r\\n" and "\\r" are newlines. The last line can have the
      newline missing.
    - Configure the reader like a builder, tabfile.separator(",").skip_lines(1),
      or with a filespec class, the same way fixed-width filespecs work.
    - Read errors do not end the iteration. They are returned in the position
      where they occured, and the caller decides what to do.
    - Multiple files can be read one after the other, as if they were one.
    - Filter records with simple operators, e.g. op(0) == "US"
    - Load the records into a Pandas dataframe.
    - No quoting or escaping (it is not a CSV parser), no multi-line records,
      read-only.
"""

from .core import TabConfig, TabConfigException
from .core import TabRecord
from .core import TabLineFilter
from .core import TabFile, TabFileException, TabFileReadError
from .core import TabRowIterator
from .core import TabMultiFile
from .core import TabOperator as op
from .core import to_pandas
from .core import tab_open

version = (0, 1, 0)
__version__ = "0.1.0"

#!/usr/bin/env python
# encoding: utf-8

"""A single line from a delimited text file, and the position of its fields"""

import sys
from collections import OrderedDict
from typing import Iterator, Optional, Union, overload

from prettytable import PrettyTable

from .tab_config import TabConfigException, validate_separator


# Bytes which terminate the field scan. Everything from here onwards
# is still part of the line, but not part of any field.
NEWLINE_BYTES = (b"\n", b"\r")


def _first_newline(data: bytes) -> int:
    """Position of the first newline byte, or len(data) if there is none"""
    end = len(data)
    for newline in NEWLINE_BYTES:
        pos = data.find(newline, 0, end)
        if pos >= 0:
            end = pos

    return end


def field_ranges(data: bytes, separator: bytes) -> tuple[slice, ...]:
    """Determine the byte ranges of all fields in 'data'. The separator
    must not be empty.

    The scan stops at the first '\\n' or '\\r'. Every separator before
    that position ends a field, hence there is always at least one
    (possibly empty) field. UTF-8 is self-synchronizing, which is why
    searching for the encoded separator always finds char boundaries.
    """

    if not separator:
        raise TabConfigException("'separator' must not be empty")

    end = _first_newline(data)
    width = len(separator)
    ranges = []
    start = 0
    while True:
        pos = data.find(separator, start, end)
        if pos < 0:
            break

        ranges.append(slice(start, pos))
        start = pos + width

    ranges.append(slice(start, end))
    return tuple(ranges)


class TabRecord:
    """One line from a delimited file.

    The record owns the line's data and a list of (byte) ranges, one per
    field. raw_line() and raw_fields() provide memoryviews on the data,
    without copying any bytes. line() and fields() provide the same as
    str. The record has no reference to the reader and remains valid
    after the iteration continued or finished.
    """

    __slots__ = ("data", "ranges", "separator", "lineno", "file", "_line")

    def __init__(self, line: Union[str, bytes], separator: str = "\t",
        lineno: int = -1, file: Optional[str] = None):

        if isinstance(line, str):
            self._line: Optional[str] = line
            self.data: bytes = line.encode("utf-8")
        else:
            # Raises UnicodeDecodeError, if the data are not valid utf-8
            self._line = str(line, "utf-8")
            self.data = bytes(line)

        self.separator = validate_separator(separator)
        self.ranges = field_ranges(self.data, separator.encode("utf-8"))
        self.lineno = lineno    # Physical line number in the file (0-based)
        self.file = file


    def line(self) -> str:
        """The original line, including newline chars if present in the file"""
        if self._line is None:
            self._line = str(self.data, "utf-8")

        return self._line


    def raw_line(self) -> memoryview:
        """The utf-8 encoded line data"""
        return memoryview(self.data)


    def raw_fields(self) -> list[memoryview]:
        """The fields as views on the line data. No bytes are copied."""
        view = memoryview(self.data)
        return [view[x] for x in self.ranges]


    def fields(self) -> list[str]:
        """The fields as strings. A new list is created on every call."""
        data = self.data
        return [str(data[x], "utf-8") for x in self.ranges]


    def field(self, index: int) -> str:
        """Get the field with the index provided. Negative values are
        counted from the end."""
        return str(self.data[self.ranges[index]], "utf-8")


    def __len__(self) -> int:
        """The number of fields (always >= 1)"""
        return len(self.ranges)


    def __bool__(self) -> bool:
        return True


    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index):
        """Access the fields like a list, e.g. rec[0], rec[-1], rec[1:3]"""
        if isinstance(index, slice):
            return [str(self.data[x], "utf-8") for x in self.ranges[index]]

        return self.field(index)


    def __iter__(self) -> Iterator[str]:
        return (str(self.data[x], "utf-8") for x in self.ranges)


    def __eq__(self, other) -> bool:
        if not isinstance(other, TabRecord):
            return NotImplemented

        return self.data == other.data and self.ranges == other.ranges


    def __hash__(self) -> int:
        return hash(self.data)


    def to_list(self) -> tuple[str, ...]:
        """Provide all field values in a tuple"""
        return tuple(self)


    def to_dict(self, *names: str) -> OrderedDict[Union[str, int], str]:
        """Provide the fields as dict. Without names, the field index
        is used as key. Surplus fields keep their index as key."""
        values = self.fields()
        keys = list(names[:len(values)]) + list(range(len(names), len(values)))
        return OrderedDict(zip(keys, values))


    def get_pretty_string(self, *names: str) -> str:
        """Get a pretty line represention"""
        data = self.to_dict(*names)
        rtn = PrettyTable()
        rtn.field_names = [str(k) for k in data.keys()]
        rtn.add_row(list(data.values()))
        return rtn.get_string()


    def get_string(self, *names: str, pretty: bool = True) -> str:
        """Create a string representation of the data"""
        if pretty:
            return self.get_pretty_string(*names)

        return f"{self.__class__.__name__}(lineno={self.lineno}, fields={self.fields()!r})"


    def print(self, *names: str, pretty: bool = True, file=sys.stdout) -> None:
        """Print the record"""
        print(self.get_string(*names, pretty=pretty), file=file)


    def __str__(self) -> str:
        return self.get_string(pretty=True)


    def __repr__(self) -> str:
        return self.get_string(pretty=False)

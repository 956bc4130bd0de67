#!/usr/bin/env python
# encoding: utf-8

"""Iterate over the records of an open tab file"""

import logging
from typing import BinaryIO, Callable, Iterator, Optional, Union

from .tab_config import TabConfig
from .tab_file import TabFileReadError
from .tab_filter import TabLineFilter
from .tab_record import TabRecord


logger = logging.getLogger(__name__)

TabItem = Union[TabRecord, TabFileReadError]


class TabRowIterator:
    """Pull one line after the other from the file, and return the ones
    which pass the line filter as TabRecord.

    Read errors do not stop the iteration. They are returned as
    TabFileReadError items in the position where they occured:

        for item in tabfile:
            if isinstance(item, TabFileReadError):
                ...
            else:
                fields = item.fields()

    Use strict() to raise the first error instead.

    A line that fails to decode is consumed and iteration continues with
    the next line. An OSError while reading closes the file, and the
    iteration ends after the error has been returned.

    The iterator owns the file and closes it at the end of the input,
    with close(), or when leaving a 'with' block.
    """

    def __init__(self, fd: BinaryIO, config: TabConfig, file: Optional[str] = None):
        self._fd: Optional[BinaryIO] = fd
        self.config = config
        self.file = file
        self.line_filter = TabLineFilter(config)

        self.lineno = 0       # Number of raw lines read so far
        self.records = 0      # Number of records returned
        self.errors = 0       # Number of errors returned


    @property
    def skip_lines(self) -> int:
        """The number of header lines still to be skipped"""
        return self.line_filter.skip_lines


    @property
    def closed(self) -> bool:
        """True, once the file has been closed"""
        return self._fd is None


    def __iter__(self) -> 'TabRowIterator':
        return self


    def __next__(self) -> TabItem:
        while self._fd is not None:
            lineno = self.lineno
            try:
                data = self._fd.readline()
            except OSError as exc:
                logger.warning("Failed to read line %d from '%s': %s", lineno, self.file, exc)
                self.close()
                return self._error(exc, lineno)

            if not data:
                logger.debug("End of input '%s': lines=%d, records=%d, skipped=%d, errors=%d",
                    self.file, self.lineno, self.records, self.line_filter.skipped, self.errors)
                self.close()
                break

            self.lineno += 1
            try:
                line = str(data, self.config.encoding)
            except UnicodeDecodeError as exc:
                logger.warning("Failed to decode line %d from '%s': %s", lineno, self.file, exc)
                return self._error(exc, lineno)

            if self.line_filter.skip(line):
                continue

            self.records += 1
            return TabRecord(line, self.config.separator, lineno, self.file)

        raise StopIteration


    def _error(self, exc: BaseException, lineno: int) -> TabFileReadError:
        self.errors += 1
        return TabFileReadError(exc, lineno, self.file)


    def strict(self) -> Iterator[TabRecord]:
        """Iterate over the records, but raise the first error"""
        for item in self:
            if isinstance(item, TabFileReadError):
                raise item

            yield item


    def filter(self, *args: Callable[[TabRecord], bool], is_or: bool = False) -> Iterator[TabItem]:
        """Keep only the records matching the conditions. Errors are passed on."""
        func = any if is_or else all
        return self.filter_by_record(lambda rec: func(arg(rec) for arg in args))


    def exclude(self, *args: Callable[[TabRecord], bool], is_or: bool = False) -> Iterator[TabItem]:
        """Remove the records matching the conditions. Errors are passed on."""
        func = any if is_or else all
        return self.filter_by_record(lambda rec: not func(arg(rec) for arg in args))


    def filter_by_record(self, func: Callable[[TabRecord], bool]) -> Iterator[TabItem]:
        """Apply 'func' to every record. Except if 'func' returns True,
        the record will be skipped."""
        for item in self:
            if isinstance(item, TabFileReadError) or func(item):
                yield item


    def close(self) -> None:
        """Close the file. The iteration ends."""
        if self._fd is not None:
            self._fd.close()
            self._fd = None
            logger.debug("Closed '%s'", self.file)


    def __enter__(self) -> 'TabRowIterator':
        return self


    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(file={self.file!r}, lineno={self.lineno}, "
            f"records={self.records}, closed={self.closed})")

#!/usr/bin/env python
# encoding: utf-8

""" TabFile """

import io
import os
import logging
from typing import Any, BinaryIO, Optional, Union, TYPE_CHECKING

from .tab_config import TabConfig
from .tab_config import validate_separator, validate_comment_character, validate_skip_lines
from .tab_config import validate_encoding

# To prevent circular dependencies only during type checking
if TYPE_CHECKING:
    from .tab_iterator import TabRowIterator


logger = logging.getLogger(__name__)


class TabFileException(Exception):
    """ TabFileException """


class TabFileReadError(TabFileException):
    """A line could not be read or decoded.

    Errors are not raised while iterating. They are returned as items,
    in the position where they occured, and the caller decides whether
    to continue or not. The original exception is available as 'cause'
    and '__cause__'.
    """

    def __init__(self, cause: BaseException, lineno: int, file: Optional[str] = None):
        super().__init__(f"Failed to read line {lineno} from '{file}': {cause}")
        self.cause = cause
        self.lineno = lineno
        self.file = file
        self.__cause__ = cause


FileType = Union[str, os.PathLike, bytes, bytearray]


class TabFile:
    """A read-only handle for a delimited text file.

    This is one of the core classes. It wraps around an open (binary)
    file, or a block of data in memory, and the configuration how to
    read it. The configuration can be changed until the iteration begins:

        with TabFile().open("data.csv").separator(",").skip_lines(1) as tabfile:
            for rec in tabfile:
                ...

    Iterating the file hands over the open file to a TabRowIterator. The
    handle is consumed thereafter and must not be changed or iterated again.
    """

    def __init__(self, config: Any = None, **kwargs):
        """Constructor

        'config' is either a TabConfig, or a filespec like class or object
        providing some or all of SEPARATOR, COMMENTS, SKIP_LINES,
        SKIP_EMPTY_LINES and ENCODING. Keyword arguments overwrite them.
        """

        self.config = TabConfig.from_filespec(config, **kwargs)

        self.file: Optional[str] = None         # File name
        self._fd: Optional[BinaryIO] = None     # open file handle
        self._iter: Optional['TabRowIterator'] = None


    @classmethod
    def from_path(cls, file: Union[str, os.PathLike], config: Any = None, **kwargs) -> 'TabFile':
        """Open the file with the configuration provided"""
        return cls(config, **kwargs).open(file)


    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray], config: Any = None, **kwargs) -> 'TabFile':
        """Read the data from memory. Nice for testing."""
        return cls(config, **kwargs).open(data)


    def open(self, file: FileType) -> 'TabFile':
        """Open the file (read-only) or wrap the data provided.

        OSError and its subclasses, e.g. FileNotFoundError or PermissionError,
        propagate unchanged. No file remains open in that case.
        """

        if file is None:
            raise TabFileException("'file' must not be None")

        if self._iter is not None:
            raise TabFileException("The TabFile has already been consumed by an iterator")

        if isinstance(file, (bytes, bytearray)):
            fd: BinaryIO = io.BytesIO(file)
            name = f"<bytes:{id(file)}>"
        elif isinstance(file, (str, os.PathLike)):
            name = os.fspath(file)
            fd = open(name, "rb")   # pylint: disable=consider-using-with
        else:
            raise TabFileException(f"Invalid 'file' argument. Must be of type str, Path or bytes: {type(file)}")

        self.close()
        self.file = name
        self._fd = fd
        logger.debug("Opened '%s' with %s", name, self.config)
        return self


    def _check_not_consumed(self) -> None:
        if self._iter is not None:
            raise TabFileException("The TabFile has been consumed by an iterator. It can no longer be modified")


    def separator(self, sep: str) -> 'TabFile':
        """Set the field separator. Default: '\\t'"""
        self._check_not_consumed()
        self.config.separator = validate_separator(sep)
        return self


    def skip_lines(self, num_lines: int) -> 'TabFile':
        """Set the number of leading lines to skip. Default: 0

        These lines are always skipped, no matter whether they are comment
        or empty lines.
        """
        self._check_not_consumed()
        self.config.skip_lines = validate_skip_lines(num_lines)
        return self


    def comment_character(self, comment_character: Optional[str]) -> 'TabFile':
        """Lines starting with the comment char will be ignored. Default: '#'

        None disables comment filtering.
        """
        self._check_not_consumed()
        self.config.comment_character = validate_comment_character(comment_character)
        return self


    def skip_empty_lines(self, skip: bool) -> 'TabFile':
        """Skip empty lines, or lines which have only whitespace. Default: True"""
        self._check_not_consumed()
        self.config.skip_empty_lines = bool(skip)
        return self


    def encoding(self, encoding: str) -> 'TabFile':
        """The encoding of the file. Default: utf-8"""
        self._check_not_consumed()
        self.config.encoding = validate_encoding(encoding)
        return self


    @property
    def consumed(self) -> bool:
        """True, once the iteration has begun"""
        return self._iter is not None


    def iter(self) -> 'TabRowIterator':
        """Begin the iteration. The TabFile hands over the open file
        to the iterator and can not be used again."""

        from .tab_iterator import TabRowIterator   # pylint: disable=import-outside-toplevel

        self._check_not_consumed()
        if self._fd is None:
            raise TabFileException("The TabFile is not open")

        fd, self._fd = self._fd, None
        self._iter = TabRowIterator(fd, self.config.copy(), self.file)
        return self._iter


    def __iter__(self) -> 'TabRowIterator':
        return self.iter()


    def __enter__(self) -> 'TabFile':
        """Make this class a context manager.

        with TabFile.from_path(file) as tabfile:
            for rec in tabfile:
                ...
        """
        return self


    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


    def close(self) -> None:
        """Close the file, and the iterator if there is one"""

        if self._fd is not None:
            self._fd.close()
            self._fd = None
            logger.debug("Closed '%s'", self.file)

        if self._iter is not None:
            self._iter.close()


    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(file={self.file!r}, config={self.config!r}, consumed={self.consumed})"

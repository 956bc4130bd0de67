#!/usr/bin/env python
# encoding: utf-8

"""A multi-file TabFile

Data (files) might be provided daily, but all files of a month,
may make up the complete data set. TabMultiFile reads the files one
after the other, as if they were one file. Every file is read with
the same configuration, and every file skips its own header lines.
"""

from typing import Any, Iterator, Optional

from .tab_file import TabFile, TabFileException, FileType
from .tab_iterator import TabItem


class TabMultiFile:
    """Read multiple files with the same configuration, one after the other"""

    def __init__(self, config: Any = None, **kwargs):
        # Never opened. Validates and holds the configuration for new files
        self._template = TabFile(config, **kwargs)
        self.config = self._template.config
        self.files: list[TabFile] = []
        self._consumed = False


    def __enter__(self) -> 'TabMultiFile':
        return self


    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


    def close(self) -> None:
        """Close all open files previously registered"""
        for file in self.files:
            file.close()


    def open_and_add(self, file: FileType) -> TabFile:
        """Open a file and register it for auto-close. The file's
        configuration is a copy of the multi-file configuration."""

        if self._consumed:
            raise TabFileException("The TabMultiFile has been consumed by an iterator")

        tabfile = TabFile(self.config).open(file)
        self.files.append(tabfile)
        return tabfile


    def _apply(self, name: str, value) -> 'TabMultiFile':
        if self._consumed:
            raise TabFileException("The TabMultiFile has been consumed by an iterator. It can no longer be modified")

        getattr(self._template, name)(value)
        for file in self.files:
            getattr(file, name)(value)

        return self


    def separator(self, sep: str) -> 'TabMultiFile':
        """Set the field separator of all files"""
        return self._apply("separator", sep)


    def skip_lines(self, num_lines: int) -> 'TabMultiFile':
        """Set the number of header lines skipped in every file"""
        return self._apply("skip_lines", num_lines)


    def comment_character(self, comment_character: Optional[str]) -> 'TabMultiFile':
        """Set the comment char of all files"""
        return self._apply("comment_character", comment_character)


    def skip_empty_lines(self, skip: bool) -> 'TabMultiFile':
        """Skip empty lines in all files"""
        return self._apply("skip_empty_lines", skip)


    def iter(self) -> Iterator[TabItem]:
        """Iterate over the records of all files, in the order the
        files were added. Every file is closed once exhausted."""

        if self._consumed:
            raise TabFileException("The TabMultiFile has already been consumed by an iterator")

        self._consumed = True
        return self._iter_files()


    def _iter_files(self) -> Iterator[TabItem]:
        for file in self.files:
            with file.iter() as records:
                yield from records


    def __iter__(self) -> Iterator[TabItem]:
        return self.iter()


    def __repr__(self) -> str:
        files = [x.file for x in self.files]
        return f"{self.__class__.__name__}(files={files!r}, config={self.config!r})"

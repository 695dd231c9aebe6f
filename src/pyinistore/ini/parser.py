# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Line based INI reader.

The parser is forgiving on purpose: a line it does not understand is
dropped and reading goes on with the next one. The only failure it
reports is a file that cannot be opened or read at all.

Supported lines (after trimming ASCII blanks):

    ```ini
    ; full-line comment
    # also a full-line comment
    key = value      ; stored under the "" section
    [section]
    key = value # inline comment stripped
    url = a=b        ; everything after the first `=` is the value
    ```
"""

import logging
from io import StringIO
from os import PathLike
from re import compile as regex
from re import escape
from typing import Protocol

import chardet

from ..abstract import FileHandler
from .consts import (
    BLANKS,
    CODEC_CONFIDENCE,
    COMMENT_MARKS,
    DEFAULT_CODEC,
    DELIMITER,
    FALLBACK_CODEC,
    SECTION_CLOSE,
    SECTION_OPEN
)
from .model import SectionTable

__all__ = ['ConfigError', 'IniParser']

logger = logging.getLogger(__name__)

_INLINE_COMMENT = regex('[%s]' % ''.join(escape(i) for i in COMMENT_MARKS))


class LineReader(Protocol):
    def readline(self) -> str: ...


class ConfigError(Exception):
    """The config source could not be opened or read."""

    def __init__(self, source: str, reason: OSError | None = None) -> None:
        super().__init__(f'Could not open config file: {source}')
        self.source = source
        self.reason = reason


class IniParser(FileHandler[SectionTable]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding or DEFAULT_CODEC

    @staticmethod
    def readstream(
        buf: LineReader, table: SectionTable | None = None
    ) -> SectionTable:
        """Parse a decoded text stream into `table` (a new one if None).

        Pairs go into `table[section][key]`; a repeated key replaces the
        earlier value. Sections only show up once they hold a pair.
        """
        if table is None:
            table = {}
        this_sect = ''
        lineno = 0
        while i := buf.readline():
            lineno += 1
            line = i.strip(BLANKS)
            if not line or line[0] in COMMENT_MARKS:
                continue
            if line[0] == SECTION_OPEN and line[-1] == SECTION_CLOSE:
                this_sect = line[1:-1].strip(BLANKS)
                continue

            key, sep, val = line.partition(DELIMITER)
            if not sep:
                logger.debug('line %d skipped, no "%s": %r',
                             lineno, DELIMITER, line)
                continue
            key = key.strip(BLANKS)
            val = _INLINE_COMMENT.split(val, maxsplit=1)[0].strip(BLANKS)

            pairs = table.setdefault(this_sect, {})
            if key in pairs:
                logger.debug('line %d overrides [%s] %s = %r',
                             lineno, this_sect, key, pairs[key])
            pairs[key] = val
        return table

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if not codec['encoding'] or codec['confidence'] < CODEC_CONFIDENCE:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}
        logger.warning('%s is not %s, read as %s (confidence %.2f)',
                       self._fn, self._codec,
                       codec['encoding'], codec['confidence'])

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode(FALLBACK_CODEC)
        return StringIO(buf)

    def read(self) -> SectionTable:
        """Read the file this parser is bound to.

        Raises:
            ConfigError: the file is missing or otherwise unreadable.
        """
        try:
            try:
                # lines end at \n only, same as the StringIO paths.
                with open(self._fn, 'r', encoding=self._codec,
                          newline='\n') as fp:
                    return self.readstream(fp)
            except UnicodeDecodeError:
                # half-read table is dropped, start over on guessed codec.
                buf = self._decode_file()
        except OSError as e:
            logger.warning('cannot read %s: %s', self._fn, e)
            raise ConfigError(self._fn, e) from e
        return self.readstream(buf)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"

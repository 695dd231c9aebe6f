# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2026/10/18 14:37:52
# @Author : Kariko Lin

import logging
from collections.abc import Mapping
from io import StringIO
from os import PathLike
from typing import Iterator

from .model import IniSectionProxy, SectionTable
from .parser import IniParser, LineReader

__all__ = ['ConfigStore']

logger = logging.getLogger(__name__)


class ConfigStore(Mapping[str, IniSectionProxy]):
    """Parsed INI content, as `section -> key -> value` strings.

        ```python
        conf = ConfigStore()
        conf.load('server.ini')  # raises ConfigError if unreadable
        port = conf.get('server', 'port', '8080')
        ```

    Every `load`/`read_*` call empties the store first, so nothing of an
    earlier source survives, not even when the new one cannot be opened.

    Note: `get()` takes a section AND a key, unlike `Mapping.get()`.
    Use `self[section]` to reach a whole section.
    """

    def __init__(self, encoding: str | None = None) -> None:
        self._codec = encoding
        self.__raw: SectionTable = {}

    def load(self, path: str | PathLike[str]) -> None:
        """Replace the store content with the INI file at `path`.

        Raises:
            ConfigError: the file could not be opened or read. The store
                is left empty.
        """
        self.__raw.clear()
        self.__raw.update(IniParser(path, self._codec).read())
        logger.debug('loaded %d section(s) from %s', len(self.__raw), path)

    def read_stream(self, buf: LineReader) -> None:
        """Replace the store content with an already decoded text stream."""
        self.__raw.clear()
        IniParser.readstream(buf, self.__raw)

    def read_string(self, text: str) -> None:
        self.read_stream(StringIO(text))

    def get(  # type: ignore[override]
        self, section: str, key: str, default: str = ''
    ) -> str:
        """Exact-match lookup; `default` if the section or key is absent."""
        pairs = self.__raw.get(section)
        if pairs is None:
            return default
        return pairs.get(key, default)

    def clear(self) -> None:
        self.__raw.clear()

    def __getitem__(self, section: str) -> IniSectionProxy:
        return IniSectionProxy(section, self.__raw[section])

    def __contains__(self, section: object) -> bool:
        return section in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return '<ConfigStore sections=%r>' % list(self.__raw)

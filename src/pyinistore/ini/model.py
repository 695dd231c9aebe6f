# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically INI Structure, flattened to two levels: section, then key.

Pairs that appear before any `[section]` header land in the `""` section,
which is also what an empty `[]` header selects.
"""

from collections.abc import Mapping
from typing import Iterator

SectionTable = dict[str, dict[str, str]]


class IniSectionProxy(Mapping[str, str]):
    """Read-only view of one INI section.

    Values are always `str` (possibly empty); no conversion is done here.
    Proxies taken before the owner reloads keep showing the old pairs.
    """

    def __init__(self, section_name: str, this_dict: dict[str, str]) -> None:
        self._name = section_name
        self._data = this_dict

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        """A detached copy of the section pairs."""
        return self._data.copy()

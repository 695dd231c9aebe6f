# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """A reader bound to a single file path."""

    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = fspath(filename)

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn

# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:10:36
# @Author : Chloride

"""
Plain INI structure: ordered sections of ordered `str: str` pairs.

No inheritance, no `+=`, no `[#include]`.
Pairs placed before the first `[section]` live in `IniClass.header`.
"""

from collections.abc import MutableMapping
from typing import Iterator, Mapping


class IniSection(MutableMapping[str, str]):
    """... is a dict, just maintaining pairs of one section.

    All pairs SHOULD be `str: str` (even an empty value),
    however in runtime we wouldn't limit that much.
    """

    def __init__(self, name: str, pairs: Mapping[str, str] | None = None):
        self._name = name
        self.__raw: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.__raw[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__raw))

    def has(self, key: str) -> bool:
        return key in self.__raw

    def set(self, key: str, value: str) -> None:
        """Overwrite `key` in place, or append it to the section."""
        self.__raw[key] = value

    def delete(self, key: str) -> bool:
        """Remove `key`. Returns `False` if it was not there."""
        return self.__raw.pop(key, None) is not None

    def to_dict(self) -> dict[str, str]:
        return self.__raw.copy()


class IniClass(MutableMapping[str, IniSection]):
    """... is simply a group of sections, representing a whole INI file."""

    # section declaration is impossible to contain ';'.
    HEADER_NAME = '; inistore_header'

    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}
        # still keep this header to
        # maintain pairs not belong to any section.
        self.header = IniSection(self.HEADER_NAME)

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self,
        key: str,
        value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def all_sections(self) -> list[IniSection]:
        """Every section in file order, *led by the header*.

        The header is always there even if the file has no loose pairs,
        so callers after real sections only should skip index 0.
        """
        return [self.header, *self.__raw.values()]

    def section(self, name: str) -> IniSection:
        return self.__raw[name]

    def new_section(self, name: str) -> IniSection:
        """Return section `name`, appending an empty one if absent."""
        if name not in self.__raw:
            self.__raw[name] = IniSection(name)
        return self.__raw[name]

    def delete(self, name: str) -> bool:
        """Remove section `name`. Returns `False` if it was not there."""
        return self.__raw.pop(name, None) is not None

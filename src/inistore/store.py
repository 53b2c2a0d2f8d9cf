# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2026/10/13 01:36:20
# @Author : Chloride

"""File-backed INI configuration, shared by threads of one process.

```python
conf = make_config()
conf.initialize('config/master.ini')
conf.write('Print', 'Hello', 'World')
conf.find('Print', 'Hello')  # 'World'
```

Which results in:

```ini
[Print]
Hello=World
```

Every mutation goes through the same cycle:
re-read the file, lock, parse it again, change it, save, unlock, re-read.
The in-memory sections are only ever a copy of what the file said last,
so two stores on one path never fight over a stale cache
(they may still race on the file itself, there is no cross-process lock).
"""

import logging
import os
from dataclasses import dataclass, field
from os.path import dirname
from threading import Lock

from .errors import (
    ConfigError,
    FileNotFound,
    InvalidParameter,
    MissingArgument,
    MissingPath,
    NotFound,
    ParseError,
    ReadError,
    SaveError,
    SectionNotFound,
    TargetIsDirectory,
)
from .fileutil import FileKind, exists
from .ini import (
    IniClass, IniParser, InvalidIniRecord, unstorable
)
from .paths import PathResolver

__all__ = ['Section', 'ConfigStore', 'make_config']

# what the codec may throw while loading a file.
_CODEC_ERRORS = (OSError, UnicodeDecodeError, InvalidIniRecord)
# and while saving one, `UnicodeEncodeError` being a `ValueError`.
_SAVE_ERRORS = (OSError, ValueError)


@dataclass
class Section:
    name: str
    data: dict[str, str] = field(default_factory=dict)


class ConfigStore:
    """A cached view of one INI file plus the lock guarding its writes.

    Pass the instance around, never copy it: the lock must stay unique.
    Nothing works until `initialize()` picks a path.
    """

    def __init__(
        self,
        resolver: PathResolver | None = None,
        encoding: str | None = None
    ) -> None:
        self._resolver = resolver
        self._encoding = encoding
        self._path = ''
        self._sections: dict[str, Section] = {}
        self._lock: Lock | None = None

    @property
    def path(self) -> str:
        return self._path

    def initialize(self, path: str | None = None) -> None:
        """Pick the backing file. Does not touch the file system.

        - no `path`: `{base}/config/{program}.ini`
        - a `str`: `{base}/{path}`

        `base` and `program` come from the store's `PathResolver`
        (by default, the directory and name of the running script).
        """
        self._sections = {}
        self._lock = Lock()

        if self._resolver is None:
            self._resolver = PathResolver()
        if path is None:
            self._path = self._resolver.default_path()
        elif isinstance(path, str):
            self._path = self._resolver.join(path)
        else:
            self._path = ''
            raise InvalidParameter(
                'initialize', f'invalid parameter {type(path).__name__}')

    def get_current_path(self) -> str:
        self._require_path('get_current_path', 'no path specified')
        return self._path

    def read(self) -> None:
        """Reload the cache from disk.

        Raises `MissingPath`, `FileNotFound` or `ParseError`.
        """
        self._require_path('read')
        if (err := self._refresh()) is not None:
            raise err

    def write(self, section: str, key: str, value: str) -> None:
        """Add or update `key=value` under `[section]`.

        Creates the file (and its folders) if absent.
        Raises `InvalidParameter` for names or values the file
        could not give back as is (see `ini.unstorable()`).

        CAUTION: a failure of the final save is only logged, not raised.
        """
        self._require_path('write')
        self._require_args('write', section=section, key=key, value=value)
        if (reason := unstorable(section, key, value)) is not None:
            raise InvalidParameter('write', reason)

        # the file may legitimately not exist yet.
        err = self._refresh()
        if err is not None and not isinstance(err, FileNotFound):
            logging.warning(f'write : ignoring failed refresh, {err}')

        try:
            with self._lock:
                self._ensure_file('write')
                doc = self._load('write')
                doc.new_section(section).set(key, value)
                try:
                    self._save(doc)
                except _SAVE_ERRORS as e:
                    logging.error(f'write : cannot save configuration, {e}')
        finally:
            self._refresh_quietly('write')

    def delete_section(self, section: str) -> None:
        """Remove `[section]` entirely. Absent section is fine."""
        self._require_path('delete_section')
        self._require_args('delete_section', section=section)
        self._refresh_quietly('delete_section')

        try:
            with self._lock:
                doc = self._load('delete_section')
                if doc.delete(section):
                    self._persist('delete_section', doc)
        finally:
            self._refresh_quietly('delete_section')

    def delete_value(self, section: str, key: str) -> None:
        """Remove `key` from `[section]`.

        The section must exist (`SectionNotFound` otherwise),
        while an absent key is fine.
        """
        self._require_path('delete_value')
        self._require_args('delete_value', section=section, key=key)
        self._refresh_quietly('delete_value')

        try:
            with self._lock:
                doc = self._load('delete_value')
                if section not in doc:
                    raise SectionNotFound(
                        'delete_value', f'cannot load section "{section}"')
                if doc.section(section).delete(key):
                    self._persist('delete_value', doc)
        finally:
            self._refresh_quietly('delete_value')

    def exist_section(self, section: str) -> Section:
        self._require_args('exist_section', section=section)
        sections = self._snapshot('exist_section')
        if section not in sections:
            raise NotFound('exist_section', f'cannot find section "{section}"')
        found = sections[section]
        return Section(found.name, found.data.copy())

    def exist_value(self, section: str, key: str) -> str:
        self._require_args('exist_value', section=section, key=key)
        data = self.exist_section(section).data
        if key not in data:
            raise NotFound('exist_value', f'cannot find value "{key}"')
        return data[key]

    def get_section_list(self) -> list[str]:
        return list(self._snapshot('get_section_list'))

    def get_key_list(self, section: str) -> list[str]:
        found = self._snapshot('get_key_list').get(section)
        return [] if found is None else list(found.data)

    def find(self, section: str, key: str) -> str:
        """Value of `key` in `[section]`, or `''` if either is absent.

        Unlike `exist_value()`, this one never raises.
        """
        found = self._snapshot('find').get(section)
        if found is None:
            return ''
        return found.data.get(key, '')

    def clear(self) -> None:
        """Delete every section, both on disk and in the cache.

        Stops at (and raises) the first failing `delete_section()`.
        """
        self._require_path('clear')
        self._refresh_quietly('clear')
        try:
            doc = self._parser().read()
        except FileNotFoundError:
            return
        except _CODEC_ERRORS as e:
            raise ReadError('clear', f'config cannot read, {e}') from e

        for i in doc.all_sections()[1:]:
            self.delete_section(i.name)

    def status(self) -> FileKind:
        """Check that the backing file exists. Leaves the cache alone."""
        self._require_path('status', 'config cannot read')
        try:
            return exists(self._path)
        except FileNotFound as e:
            raise FileNotFound('status', e.detail) from e

    # internals

    def _require_path(self, op: str, reason: str = 'missing path') -> None:
        if not self._path:
            raise MissingPath(op, reason)

    @staticmethod
    def _require_args(op: str, **fields: str) -> None:
        for name, val in fields.items():
            if not val:
                raise MissingArgument(op, name)

    def _parser(self) -> IniParser:
        return IniParser(self._path, self._encoding)

    def _refresh(self) -> ConfigError | None:
        """Replace the whole cache with what the file says now.

        Errors are handed back instead of raised:
        this runs at the tail of every operation,
        and a caller who only wanted a value shouldn't crash on it.
        """
        # swapped by reference, never filled in place:
        # lock-free readers see either the old mapping or the new one.
        with self._lock:
            try:
                exists(self._path)
            except FileNotFound as e:
                self._sections = {}
                return FileNotFound('refresh', e.detail)

            try:
                doc = self._parser().read()
            except _CODEC_ERRORS as e:
                self._sections = {}
                return ParseError('refresh', f'config cannot read, {e}')

            # index 0 is the header, not a real section.
            self._sections = {
                i.name: Section(i.name, i.to_dict())
                for i in doc.all_sections()[1:]
            }
        return None

    def _refresh_quietly(self, op: str) -> None:
        if (err := self._refresh()) is not None:
            logging.debug(f'{op} : {err}')

    def _snapshot(self, op: str) -> dict[str, Section]:
        # queries never raise on a bad file, they just see nothing.
        if self._path:
            self._refresh_quietly(op)
        return self._sections

    def _ensure_file(self, op: str) -> None:
        try:
            kind = exists(self._path)
        except FileNotFound:
            try:
                os.makedirs(dirname(self._path), exist_ok=True)
                with open(self._path, 'a', encoding=self._encoding):
                    pass
            except OSError as e:
                raise SaveError(
                    op, f'cannot create configuration, {e}') from e
            return
        if kind is FileKind.DIRECTORY:
            raise TargetIsDirectory(op, 'target is directory')

    def _load(self, op: str) -> IniClass:
        try:
            return self._parser().read()
        except _CODEC_ERRORS as e:
            raise ReadError(op, f'cannot read configuration, {e}') from e

    def _save(self, doc: IniClass) -> None:
        self._parser().write(doc)

    def _persist(self, op: str, doc: IniClass) -> None:
        try:
            self._save(doc)
        except _SAVE_ERRORS as e:
            raise SaveError(op, f'cannot save configuration, {e}') from e


def make_config(
    resolver: PathResolver | None = None,
    encoding: str | None = None
) -> ConfigStore:
    """Create an empty, uninitialized store."""
    return ConfigStore(resolver, encoding)

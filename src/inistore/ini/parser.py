# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 22:47:02
# @Author : Chloride

"""Read and save a single INI file.

Grammar is kept as small as the store needs:

    ```ini
    ; pairs before any section go to `IniClass.header`
    loose = pair

    [section]
    key = value ; not a comment, a value keeps all after the first '='
    ; whole line comments start with ';' or '#'
    ```

Names and values are trimmed on reading, and nothing is escaped,
so `unstorable()` tells what would not survive a save-and-read.

Saving goes to a temp file next to the target, then `os.replace`s it.
The previous content is copied to `<file>.bak` beforehand.
"""

import os
import shutil
import tempfile
from io import StringIO, TextIOBase
from os.path import basename, dirname, exists
from warnings import warn

import chardet

from .model import IniClass, IniSection
from ..abstract import FileHandler

BACKUP_SUFFIX = '.bak'


class InvalidIniRecord(Exception):
    """To record errors when reading INI files."""
    pass


def _padded(s: str) -> bool:
    return s != s.strip()


def unstorable(section: str, key: str, value: str) -> str | None:
    """Why `[section] key=value` would read back differently, or `None`."""
    for what, s in (('section', section), ('key', key), ('value', value)):
        if '\n' in s or '\r' in s:
            return f'{what} contains a line break'
        if _padded(s):
            return f'{what} has leading or trailing spaces'
    if ']' in section:
        return "section contains ']'"
    if '=' in key:
        return "key contains '='"
    if key[:1] in (';', '#', '['):
        return f"key starts with '{key[0]}'"
    return None


class IniParser(FileHandler[IniClass]):
    def __init__(self, filename: str, encoding: str | None = None):
        super().__init__(filename)
        self._codec = encoding

    @property
    def backup_path(self) -> str:
        return self._fn + BACKUP_SUFFIX

    @staticmethod
    def readstream(buf: TextIOBase, ins: IniClass | None = None) -> IniClass:
        """Read from a decoded chars stream.

        Just call `self.read()` if nothing special.
        """
        if ins is None:
            ins = IniClass()
        this_sect = ins.header
        lineno = 0
        while i := buf.readline():
            lineno += 1
            i = i.strip()
            if not i or i[0] in ';#':
                continue
            if i[0] == '[':
                end = i.find(']')
                if end < 0:
                    raise InvalidIniRecord(
                        f'line {lineno}: unclosed section header "{i}"')
                this_sect = ins.new_section(i[1:end].strip())
            elif '=' in i:
                key, val = i.split('=', 1)
                key = key.strip()
                if not key:
                    continue
                if key in this_sect:
                    warn(f'{this_sect} has duplicated key "{key}", '
                         'the latter one wins.')
                this_sect[key] = val.strip()
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('gbk')
        return StringIO(buf)

    def read(self) -> IniClass:
        """Read the file bound to this `IniParser`.

        May raise `OSError`, `UnicodeDecodeError` or `InvalidIniRecord`.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            return self.readstream(self._decode_file(self._fn))

    @staticmethod
    def _section2str(section: IniSection) -> str:
        ret = f'[{section.name}]'
        for k, v in section.items():
            ret += f'\n{k}={v}'
        return ret

    def write(self, instance: IniClass, *, backup: bool = True) -> None:
        """Save to *one* INI file.

        The target is either fully replaced or left as it was.
        With `backup=True` the old content is first copied to
        `self.backup_path`.

        May raise `OSError`, or `UnicodeEncodeError`
        if the text does not fit the parser's encoding.
        """
        buffers = []
        if len(instance.header):
            buffers.append('\n'.join(
                f'{k}={v}' for k, v in instance.header.items()))
        buffers.extend(self._section2str(i) for i in instance.values())

        fd, tmp = tempfile.mkstemp(
            prefix=basename(self._fn) + '.', suffix='.tmp',
            dir=dirname(self._fn) or None)
        try:
            with os.fdopen(fd, 'w', encoding=self._codec) as fp:
                for i in buffers:
                    fp.write(i)
                    fp.write('\n\n')
            if exists(self._fn):
                shutil.copymode(self._fn, tmp)
                if backup:
                    shutil.copy2(self._fn, self.backup_path)
            os.replace(tmp, self._fn)
        except Exception:
            # the target is untouched until `os.replace`.
            if exists(tmp):
                os.remove(tmp)
            raise

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"

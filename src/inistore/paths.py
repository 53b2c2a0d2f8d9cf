# -*- encoding: utf-8 -*-
# @File   : paths.py
# @Time   : 2026/10/13 00:12:55
# @Author : Chloride

"""Where a store looks for its file, if the caller does not say.

    - app_root  (where `tool.py` lives)
        - tool.py
        - config
            - tool.ini   (the default one)

Both the base dir and program name may be injected,
so nothing here has to peek at `sys.argv` during tests.
"""

import os
import sys
from os.path import abspath, basename, dirname, join, normpath

DEFAULT_SUBDIR = 'config'
INI_SUFFIX = '.ini'


def _launched_interactively(argv0: str) -> bool:
    # `python`, `python -c ...` and embedded interpreters.
    return argv0 in ('', '-c')


class PathResolver:
    def __init__(
        self,
        base_dir: str | None = None,
        program: str | None = None
    ) -> None:
        argv0 = sys.argv[0] if sys.argv else ''
        if base_dir is None:
            base_dir = (os.getcwd() if _launched_interactively(argv0)
                        else dirname(abspath(argv0)))
        if program is None:
            program = ('inistore' if _launched_interactively(argv0)
                       else basename(argv0))
        self.base_dir = abspath(base_dir)
        self.program = program

    @property
    def ini_name(self) -> str:
        """Program name up to its first dot, then `.ini`."""
        return self.program.split('.')[0] + INI_SUFFIX

    def default_path(self) -> str:
        return join(self.base_dir, DEFAULT_SUBDIR, self.ini_name)

    def join(self, relative: str) -> str:
        """Resolve `relative` under `self.base_dir`.

        Leading separators are dropped, so `'/x.ini'` still means
        `{base_dir}/x.ini` and `'//'` means the base dir itself.
        """
        cleaned = normpath(relative).lstrip('/\\')
        if cleaned == '.':
            cleaned = ''
        return normpath(join(self.base_dir, cleaned))

    def __repr__(self) -> str:
        return f'PathResolver({self.base_dir!r}, {self.program!r})'

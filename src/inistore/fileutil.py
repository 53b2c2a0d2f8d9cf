# -*- encoding: utf-8 -*-
# @File   : fileutil.py
# @Time   : 2026/10/12 21:41:07
# @Author : Chloride

import os
import stat
from enum import Enum
from os.path import normpath

from .errors import FileNotFound


class FileKind(int, Enum):
    DIRECTORY = 0
    FILE = 1
    OTHER = 2  # fifo, socket, device...


def exists(target: str) -> FileKind:
    """Stat `target` and tell what it is.

    Raises `FileNotFound` if it cannot be stat'ed at all
    (missing, dangling link, no permission on a parent dir).
    """
    try:
        mode = os.stat(normpath(target)).st_mode
    except (OSError, ValueError) as e:
        raise FileNotFound('exists', f'invalid filepath "{target}"') from e

    if stat.S_ISDIR(mode):
        return FileKind.DIRECTORY
    if stat.S_ISREG(mode):
        return FileKind.FILE
    return FileKind.OTHER

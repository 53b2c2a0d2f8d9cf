# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/13 02:20:09
# @Author : Chloride

import logging

from .errors import (
    ConfigError, InvalidParameter, MissingPath, MissingArgument,
    FileNotFound, TargetIsDirectory, ParseError, ReadError, SaveError,
    NotFound, SectionNotFound
)
from .fileutil import FileKind, exists
from .ini import IniClass, IniSection, IniParser
from .paths import PathResolver
from .store import ConfigStore, Section, make_config

__all__ = [
    'ConfigStore', 'Section', 'make_config',
    'PathResolver', 'FileKind', 'exists',
    'IniClass', 'IniSection', 'IniParser',
    'ConfigError', 'InvalidParameter', 'MissingPath', 'MissingArgument',
    'FileNotFound', 'TargetIsDirectory', 'ParseError', 'ReadError',
    'SaveError', 'NotFound', 'SectionNotFound'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

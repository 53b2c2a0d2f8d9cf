# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 22:49:30
# @Author : Chloride

from .model import IniSection, IniClass
from .parser import IniParser, InvalidIniRecord, BACKUP_SUFFIX, unstorable

__all__ = [
    'IniSection', 'IniClass',
    'IniParser', 'InvalidIniRecord', 'BACKUP_SUFFIX', 'unstorable'
]

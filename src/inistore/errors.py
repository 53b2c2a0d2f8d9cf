# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:20:41
# @Author : Chloride

"""Errors raised by `ConfigStore`.

Every message reads like `"<operation> : <reason>"`,
so callers may log `str(err)` directly.
"""


class ConfigError(Exception):
    """Base of all store errors."""

    def __init__(self, op: str, detail: str) -> None:
        super().__init__(f'{op} : {detail}')
        self.op = op
        self.detail = detail


class InvalidParameter(ConfigError):
    """`initialize()` got something other than a path string."""
    pass


class MissingPath(ConfigError):
    """The store has not been initialized yet."""
    pass


class MissingArgument(ConfigError):
    def __init__(self, op: str, field: str) -> None:
        super().__init__(op, f'missing {field}')
        self.field = field


class FileNotFound(ConfigError):
    pass


class TargetIsDirectory(ConfigError):
    pass


class ParseError(ConfigError):
    """The INI codec failed while refreshing the cache."""
    pass


class ReadError(ConfigError):
    """The INI codec failed to load the file before a mutation."""
    pass


class SaveError(ConfigError):
    pass


class NotFound(ConfigError):
    pass


class SectionNotFound(NotFound):
    pass

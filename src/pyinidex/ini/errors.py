# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 22:03:48
# @Author : Kariko Lin


class IniError(Exception):
    """Base of every error raised while loading or saving INI files."""
    pass


class FileOpenError(IniError, OSError):
    """The source can't be read, or the target can't be written."""
    def __init__(self, path: str, reason: str = 'open') -> None:
        super().__init__(f"can't {reason} IniFile: {path}")
        self.path = path


class IniParseError(IniError):
    """Fatal format error. `line` is 1-based."""
    message = 'malformed INI'

    def __init__(self, line: int) -> None:
        super().__init__(f'{self.message} in line: {line}')
        self.line = line


class EmptyKeyOrValue(IniParseError):
    message = 'empty key or value'


class KeyValueWithoutSection(IniParseError):
    message = 'key and value without section'


class DuplicateKey(IniParseError):
    message = 'duplicate key'


class InvalidIniLayout(IniError):
    """A converted document (e.g. YAML) is not a list of sections."""
    pass

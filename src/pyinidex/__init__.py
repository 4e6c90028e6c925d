# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:38:04
# @Author : Kariko Lin

from .ini import (
    IniFile, IniSection, IniStore, IniParser, IniYamlParser,
    IniError, FileOpenError, IniParseError, InvalidIniLayout,
    EmptyKeyOrValue, KeyValueWithoutSection, DuplicateKey
)

__all__ = [
    'IniFile', 'IniSection', 'IniStore', 'IniParser', 'IniYamlParser',
    'IniError', 'FileOpenError', 'IniParseError', 'InvalidIniLayout',
    'EmptyKeyOrValue', 'KeyValueWithoutSection', 'DuplicateKey'
]

# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:45:30
# @Author : Kariko Lin

from .errors import (
    IniError,
    FileOpenError,
    IniParseError,
    InvalidIniLayout,
    EmptyKeyOrValue,
    KeyValueWithoutSection,
    DuplicateKey
)
from .model import IniElement, IniSection, IniOccurrence, IniStore
from .parser import IniParser
from .convert import IniYamlParser
from .file import IniFile

# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/11/05 23:11:46
# @Author : Kariko Lin

"""Store <-> YAML, keeping line numbers.

```yaml
- section: server
  line: 1
  keys:
  - key: port
    value: '8080'
    line: 2
```
"""

import logging
from os import PathLike
from typing import TypedDict

import yaml

from ..abstract import FileHandler
from .consts import DEFAULT_ENCODING
from .errors import (
    DuplicateKey,
    EmptyKeyOrValue,
    FileOpenError,
    InvalidIniLayout
)
from .model import IniStore


class _YamlPair(TypedDict):
    key: str
    value: str
    line: int


class _YamlSection(TypedDict):
    section: str
    line: int
    keys: list[_YamlPair]


class IniYamlParser(FileHandler[IniStore]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = DEFAULT_ENCODING
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def to_sections(instance: IniStore) -> list[_YamlSection]:
        """Same order as the text output."""
        ret: list[_YamlSection] = []
        for sect in sorted(instance, key=lambda x: x.line):
            ret.append(_YamlSection(
                section=sect.name,
                line=sect.line,
                keys=[
                    _YamlPair(key=k.name, value=v, line=k.line)
                    for k, v in sorted(
                        sect.elements(), key=lambda x: x[0].line)
                ]
            ))
        return ret

    @staticmethod
    def _line_of(entry: dict, where: str) -> int:
        line = entry.get('line', 0)
        if isinstance(line, bool) or not isinstance(line, int) or line < 0:
            raise InvalidIniLayout(f'{where}: bad line number {line!r}')
        return line

    @staticmethod
    def from_sections(data: list[_YamlSection] | None) -> IniStore:
        """Checked like the text form: pairs are space-trimmed,
        and an empty (or null) side is an `EmptyKeyOrValue`."""
        if data is None:
            data = []
        if not isinstance(data, list):
            raise InvalidIniLayout(
                f'expected a list of sections, got {type(data).__name__}')
        ret = IniStore()
        for idx, i in enumerate(data):
            if not isinstance(i, dict) or i.get('section') is None:
                raise InvalidIniLayout(f'item {idx}: no `section` given')
            sect = ret.append(
                str(i['section']), IniYamlParser._line_of(i, f'item {idx}'))
            pairs = i.get('keys') or []
            if not isinstance(pairs, list):
                raise InvalidIniLayout(f'{sect!r}: `keys` is not a list')
            for pair in pairs:
                if not isinstance(pair, dict):
                    raise InvalidIniLayout(f'{sect!r}: bad pair {pair!r}')
                line = IniYamlParser._line_of(pair, repr(sect))
                # may there be some pure digits considered as int
                key, val = (
                    '' if pair.get(j) is None else str(pair[j]).strip(' ')
                    for j in ('key', 'value'))
                if not key or not val:
                    raise EmptyKeyOrValue(line)
                if key in sect:
                    raise DuplicateKey(line)
                sect.insert(key, val, line)
        return ret

    def read(self) -> IniStore:
        try:
            with open(self._fn, 'r', encoding=self._codec) as fp:
                data = yaml.safe_load(fp)
        except OSError as e:
            raise FileOpenError(self._fn) from e
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise InvalidIniLayout(f'{self._fn}: {e}') from e
        ret = self.from_sections(data)
        logging.debug(f'{self._fn}: {len(ret)} section(s) imported.')
        return ret

    def write(self, instance: IniStore) -> None:
        buffer = yaml.safe_dump(
            self.to_sections(instance),
            allow_unicode=True, sort_keys=False)
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                fp.write(buffer)
        except OSError as e:
            raise FileOpenError(self._fn, 'save') from e
        logging.debug(f'{self._fn}: {len(instance)} section(s) exported.')

# -*- encoding: utf-8 -*-
# @File   : file.py
# @Time   : 2024/11/04 20:37:02
# @Author : Kariko Lin

"""
`IniFile`: a path, plus the store loaded from it.

Loading and saving are strict and raise `IniError`s.
Everything else is permissive: a missing section, a missing key,
or an out-of-range ordinal just gives back the default,
an empty list, `0` or `False`.

```python
ini = IniFile('server.ini')
ini.load()
for sect in ini['server']:
    port = ini.read_int(sect, 'port', 80)
```
"""

import logging
from os import PathLike

from .codec import Scalar, decode_bool, decode_float, decode_int, encode
from .consts import DEFAULT_DELIMITER, DEFAULT_ENCODING
from .model import IniOccurrence, IniSection, IniStore
from .parser import IniParser

SectionLike = IniSection | str


def _as_handle(section: SectionLike) -> IniSection:
    return IniSection(section) if isinstance(section, str) else section


class IniFile:
    def __init__(
        self, path: str | PathLike[str],
        encoding: str = DEFAULT_ENCODING
    ) -> None:
        self._parser = IniParser(path, encoding)
        self._store = IniStore()

    @property
    def path(self) -> str:
        return self._parser.filename

    @property
    def store(self) -> IniStore:
        return self._store

    def __getitem__(self, name: SectionLike) -> list[IniSection]:
        return self.section_range(name)

    def __str__(self) -> str:
        return str(self._parser)

    def _resolve(self, section: SectionLike) -> IniOccurrence | None:
        return self._store.resolve(_as_handle(section))

    # load & save

    def load(self) -> None:
        """(Re)load from disk. On failure the current data is untouched."""
        self._store = self._parser.read()

    def loads(self, text: str) -> None:
        self._store = IniParser.loads(text)

    def save(
        self, *,
        blank_lines: int = 1,
        delimiter: str = DEFAULT_DELIMITER
    ) -> None:
        self._parser.write(
            self._store, blank_lines=blank_lines, delimiter=delimiter)

    def dumps(self, **kwargs) -> str:
        return IniParser.dumps(self._store, **kwargs)

    # queries

    def section_exists(self, section: SectionLike) -> bool:
        return self._resolve(section) is not None

    def key_exists(self, section: SectionLike, key: str) -> bool:
        return (sect := self._resolve(section)) is not None and key in sect

    def sections(self) -> list[IniSection]:
        """All occurrences, each with its ordinal among the same name."""
        ret: list[IniSection] = []
        seen: dict[str, int] = {}
        for sect in self._store:
            idx = seen.get(sect.name, 0)
            seen[sect.name] = idx + 1
            ret.append(IniSection(sect.name, idx, sect.line))
        return ret

    def section_range(self, section: SectionLike) -> list[IniSection]:
        name = _as_handle(section).name
        return [
            IniSection(name, idx, sect.line)
            for idx, sect in enumerate(self._store.occurrences(name))
        ]

    def section_count(self, section: SectionLike) -> int:
        return self._store.count(_as_handle(section).name)

    def keys(self, section: SectionLike) -> list[str]:
        if (sect := self._resolve(section)) is None:
            return []
        return list(sect)

    def get_key_line_num(self, section: SectionLike, key: str) -> int:
        """0 means the key is not found (or was never parsed)."""
        if (sect := self._resolve(section)) is None:
            return 0
        return sect.line_of(key)

    # typed reads

    def read_str(
        self, section: SectionLike, key: str, default: str = ''
    ) -> str:
        if (sect := self._resolve(section)) is None or key not in sect:
            return default
        return sect[key]

    def read_bool(
        self, section: SectionLike, key: str, default: bool = False
    ) -> bool:
        if (sect := self._resolve(section)) is None or key not in sect:
            return default
        return decode_bool(sect[key])

    def read_int(
        self, section: SectionLike, key: str, default: int = 0
    ) -> int:
        if (sect := self._resolve(section)) is None or key not in sect:
            return default
        ret = decode_int(sect[key])
        return default if ret is None else ret

    def read_float(
        self, section: SectionLike, key: str, default: float = 0.0
    ) -> float:
        if (sect := self._resolve(section)) is None or key not in sect:
            return default
        ret = decode_float(sect[key])
        return default if ret is None else ret

    def read(
        self, section: SectionLike, key: str, default: Scalar = ''
    ) -> Scalar:
        """Decode according to the type of `default`."""
        match default:
            case bool():
                return self.read_bool(section, key, default)
            case int():
                return self.read_int(section, key, default)
            case float():
                return self.read_float(section, key, default)
            case _:
                return self.read_str(section, key, default)

    # writes

    def write_section(self, name: str) -> IniSection:
        """Always a new occurrence, even if `name` exists already."""
        sect = self._store.append(name)
        return self._store.handle_of(sect)

    def write(self, section: SectionLike, key: str, value: Scalar) -> None:
        """Set a value. Does nothing if `section` can't be resolved."""
        text = encode(value)
        if (sect := self._resolve(section)) is None:
            logging.debug(f'{section} not found, "{key}" is not written.')
            return
        sect[key] = text

    def remove_section(self, section: SectionLike) -> bool:
        """Later occurrences of the same name move one ordinal down."""
        if (sect := self._resolve(section)) is None:
            return False
        self._store.remove(sect)
        return True

    def remove_key(self, section: SectionLike, key: str) -> bool:
        if (sect := self._resolve(section)) is None or key not in sect:
            return False
        del sect[key]
        return True

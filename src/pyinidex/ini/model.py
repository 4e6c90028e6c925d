# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 22:15:31
# @Author : Kariko Lin

"""
INI structure allowing *repeated* section names.

```ini
[server]
port = 8080

[server]      ; another occurrence, NOT merged into the first one.
port = 8081
```

Each `[server]` is an `IniOccurrence`, addressed from outside by an
`IniSection` handle: the name plus its ordinal among same-named occurrences.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class IniElement:
    """A name and the line it first appeared on (0 if not parsed)."""
    name: str
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class IniSection:
    """Caller-held handle of a section occurrence.

    Compares by `name` only. `index` picks which same-named occurrence,
    `line` is for display. Holding a handle keeps nothing alive:
    it is resolved against the store again on every access.
    """
    name: str
    index: int = field(default=0, compare=False)
    line: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f'[{self.name}]#{self.index}'


class IniOccurrence(MutableMapping[str, str]):
    """One `[name]` appearance and its own key-value pairs.

    Assigning a new key records line 0;
    overwriting an existing key keeps the line it was parsed from.
    """
    def __init__(self, ident: int, element: IniElement) -> None:
        self._ident = ident
        self._element = element
        self.__data: dict[str, str] = {}
        self.__lines: dict[str, int] = {}

    @property
    def ident(self) -> int:
        """Stable id inside the owning store, never reused."""
        return self._ident

    @property
    def element(self) -> IniElement:
        return self._element

    @property
    def name(self) -> str:
        return self._element.name

    @property
    def line(self) -> int:
        return self._element.line

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self.__lines.setdefault(key, 0)
        self.__data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__data[key]
        del self.__lines[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__data

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __len__(self) -> int:
        return len(self.__data)

    def __repr__(self) -> str:
        return '[%s] { .id = %d, .line = %d, .cnt = %d }' % (
            self.name, self._ident, self.line, len(self.__data))

    def insert(self, key: str, value: str, line: int) -> None:
        """Add a parsed pair. The caller checks uniqueness first."""
        self.__data[key] = value
        self.__lines[key] = line

    def line_of(self, key: str) -> int:
        """Line the key came from; 0 if missing or created by assignment."""
        return self.__lines.get(key, 0)

    def elements(self) -> list[tuple[IniElement, str]]:
        return [(IniElement(k, self.__lines[k]), v)
                for k, v in self.__data.items()]


class IniStore:
    """Arena of section occurrences.

    Occurrences get an integer id when created and keep it for good.
    Ordinals (`IniSection.index`) are positions in the per-name id list,
    so removing one occurrence shifts the ordinals of the later ones.
    """
    def __init__(self) -> None:
        self.__arena: dict[int, IniOccurrence] = {}
        self.__names: dict[str, list[int]] = {}
        self.__next_id = 0

    def append(self, name: str, line: int = 0) -> IniOccurrence:
        """Always a brand-new occurrence, even if `name` already exists."""
        ret = IniOccurrence(self.__next_id, IniElement(name, line))
        self.__next_id += 1
        self.__arena[ret.ident] = ret
        self.__names.setdefault(name, []).append(ret.ident)
        return ret

    def get(self, ident: int) -> IniOccurrence | None:
        return self.__arena.get(ident)

    def occurrences(self, name: str) -> list[IniOccurrence]:
        return [self.__arena[i] for i in self.__names.get(name, [])]

    def count(self, name: str) -> int:
        return len(self.__names.get(name, []))

    def resolve(self, handle: IniSection) -> IniOccurrence | None:
        idents = self.__names.get(handle.name)
        if not idents or not 0 <= handle.index < len(idents):
            return None
        return self.__arena[idents[handle.index]]

    def index_of(self, occurrence: IniOccurrence) -> int:
        return self.__names[occurrence.name].index(occurrence.ident)

    def handle_of(self, occurrence: IniOccurrence) -> IniSection:
        return IniSection(
            occurrence.name, self.index_of(occurrence), occurrence.line)

    def remove(self, occurrence: IniOccurrence) -> None:
        del self.__arena[occurrence.ident]
        idents = self.__names[occurrence.name]
        idents.remove(occurrence.ident)
        if not idents:
            del self.__names[occurrence.name]

    def __contains__(self, name: object) -> bool:
        return name in self.__names

    def __iter__(self) -> Iterator[IniOccurrence]:
        return iter(list(self.__arena.values()))

    def __len__(self) -> int:
        return len(self.__arena)

    def __repr__(self) -> str:
        return 'IniStore { .sections = %d, .names = %d }' % (
            len(self.__arena), len(self.__names))

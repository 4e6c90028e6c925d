# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 15:02:19
# @Author : Kariko Lin

"""Reading and writing the plain text form.

Supported lines (anything else is skipped silently):

    [section]       ; repeated names are kept as separate occurrences.
    key = value     ; only spaces are trimmed, tabs stay.

Parsing is strict: an empty key or value, a pair before any section,
or a duplicated key within one occurrence stops the whole read.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike
from warnings import warn

import chardet

from ..abstract import FileHandler
from .consts import DEFAULT_DELIMITER, DEFAULT_ENCODING
from .errors import (
    DuplicateKey,
    EmptyKeyOrValue,
    FileOpenError,
    KeyValueWithoutSection
)
from .model import IniOccurrence, IniStore


class IniParser(FileHandler[IniStore]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = DEFAULT_ENCODING
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(buf: TextIOBase) -> IniStore:
        """读取解码好的字符串流，一次一行。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        ret = IniStore()
        this_sect: IniOccurrence | None = None
        lineno = 0
        while i := buf.readline():
            lineno += 1
            i = i.rstrip('\r\n')
            lbr, rbr = i.find('['), i.rfind(']')
            if lbr >= 0 and rbr >= 0:
                if i.count('[') > 1 or i.count(']') > 1:
                    warn(f'第 {lineno} 行有多对方括号，'
                         f'小节名按首个`[`到末个`]`截取：{i!r}')
                this_sect = ret.append(i[lbr + 1:rbr], lineno)
            elif '=' in i:
                key, val = (j.strip(' ') for j in i.split('=', 1))
                if not key or not val:
                    raise EmptyKeyOrValue(lineno)
                if this_sect is None:
                    raise KeyValueWithoutSection(lineno)
                if key in this_sect:
                    raise DuplicateKey(lineno)
                this_sect.insert(key, val, lineno)
        return ret

    @staticmethod
    def loads(text: str) -> IniStore:
        return IniParser.readstream(StringIO(text))

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        try:
            with open(filename, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise FileOpenError(filename) from e

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}
        logging.warning(
            f'{filename} is not valid in the given encoding, '
            f'decoding as {codec["encoding"]} instead.')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            try:
                buf = raw.decode('gbk')
            except UnicodeDecodeError as e:
                raise FileOpenError(filename, 'decode') from e
        return StringIO(buf)

    def read(self) -> IniStore:
        """读取`IniParser`实例指定的文件。

        出错即中止，不返回读了一半的结果。
        """
        try:
            # when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            # split on '\n' only, same as `loads()`; '\r' is stripped later.
            with open(
                self._fn, 'r', encoding=self._codec, newline='\n'
            ) as fp:
                ret = self.readstream(fp)
        except UnicodeDecodeError:
            ret = self.readstream(self._decode_file(self._fn))
        except OSError as e:
            raise FileOpenError(self._fn) from e
        logging.debug(f'{self._fn}: {len(ret)} section(s) loaded.')
        return ret

    @staticmethod
    def dumps(
        instance: IniStore, *,
        blank_lines: int = 1,
        delimiter: str = DEFAULT_DELIMITER
    ) -> str:
        """Sections, and keys inside each section, in ascending line order.

        Both sorts are stable, so things sharing a line number
        (typically 0, i.e. added in code) keep their creation order.
        Keys added in code therefore come *before* the parsed ones.
        """
        ret = StringIO()
        for sect in sorted(instance, key=lambda x: x.line):
            ret.write(f'[{sect.name}]\n')
            for k, v in sorted(sect.elements(), key=lambda x: x[0].line):
                ret.write(f'{k.name}{delimiter}{v}\n')
            ret.write('\n' * blank_lines)
        return ret.getvalue()

    def write(
        self, instance: IniStore, *,
        blank_lines: int = 1,
        delimiter: str = DEFAULT_DELIMITER
    ) -> None:
        """保存到 INI 文件。先整体生成文本，打开失败则什么也不写。"""
        buffer = self.dumps(
            instance, blank_lines=blank_lines, delimiter=delimiter)
        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                fp.write(buffer)
        except OSError as e:
            raise FileOpenError(self._fn, 'save') from e
        logging.debug(f'{self._fn}: {len(instance)} section(s) saved.')

    def __str__(self) -> str:
        return f"INI file: {super().__str__()} ({self._codec})"

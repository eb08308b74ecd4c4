"""
Error taxonomy surfaced by the option parser.

Responsibilities:
    * closed set of parse error kinds
    * error value carrying the offending option character
    * getopt style rendering of error messages
"""
# 说明：解析器对外暴露的错误分类与错误载体。
# 职责：
# - ErrorKind：封闭的两类错误（未知选项 / 缺少参数）
# - OptionError：携带出错选项字符的异常对象；解析器以返回值形式交付，而非直接抛出
# - debug_quote(...)：将单个字符渲染为带单引号的字面量，用于错误消息

from __future__ import annotations

import enum
import unicodedata
from typing import Any


class ErrorKind(enum.Enum):
    """What kinds of errors the parser can report."""

    MISSING_ARGUMENT = "missing_argument"
    UNKNOWN_OPTION = "unknown_option"


_MESSAGES = {
    ErrorKind.MISSING_ARGUMENT: "option requires an argument -- {}",
    ErrorKind.UNKNOWN_OPTION: "unknown option -- {}",
}

# 组合类字符（Mn/Me）单独打印时会附着在引号上，与不可打印字符一样转义
_COMBINING = ("Mn", "Me")

_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "'": "\\'",
    "\\": "\\\\",
}


def debug_quote(char: str) -> str:
    """Render ``char`` as a single-quoted character literal, e.g. ``'a'`` or ``'\\n'``."""
    if char in _ESCAPES:
        body = _ESCAPES[char]
    elif char.isprintable() and unicodedata.category(char) not in _COMBINING:
        body = char
    else:
        body = "\\u{%x}" % ord(char)
    return f"'{body}'"


class OptionError(Exception):
    """
    A parse error for a single option character.

    - Attributes
      - kind: ErrorKind of the failure.
      - culprit: The option character that caused it.

    - Behavior
      - str(error) gives the conventional getopt message.
      - Two errors compare equal when kind and culprit match.
    """

    def __init__(self, kind: ErrorKind, culprit: str):
        self.kind = kind
        self.culprit = culprit
        # args 保存构造参数，copy / pickle 依赖它重建异常对象
        super().__init__(kind, culprit)

    def __str__(self) -> str:
        return _MESSAGES[self.kind].format(debug_quote(self.culprit))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, OptionError):
            return NotImplemented
        return (self.kind, self.culprit) == (other.kind, other.culprit)

    def __hash__(self) -> int:
        return hash((self.kind, self.culprit))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind}, {self.culprit!r})"

    # 构造辅助：与 ErrorKind 一一对应，便于在解析器与测试中书写
    @classmethod
    def unknown_option(cls, culprit: str) -> "OptionError":
        return cls(ErrorKind.UNKNOWN_OPTION, culprit)

    @classmethod
    def missing_argument(cls, culprit: str) -> "OptionError":
        return cls(ErrorKind.MISSING_ARGUMENT, culprit)

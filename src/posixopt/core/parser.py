"""
POSIX getopt style option parser.

Responsibilities:
    * walk an argument vector one option character at a time
    * attach values either from the rest of a token or from the next token
    * stop at the first non-option token, at ``-`` or after ``--``
    * report unknown options and missing values as recoverable values

Usage Context:
    * ``Parser(sys.argv, "ab:c")`` then iterate, or call ``step()`` directly
    * after the last option, ``parser.index`` points at the first operand
    * ``set_index`` re-points a parser, e.g. for a second scan with another
      optstring over the same arguments

Limitations:
    * no long options and no reordering of operands
"""
# 说明：解析器核心，按 getopt(3) 的扫描规则逐字符遍历参数向量。
# 职责：
# - Parser：持有参数向量、OptionSpec 与 (index, point) 游标，step() 每次推进一步
# - getopt(...)：一次性驱动 Parser 至结束，遇到第一个错误即抛出
# 约定：
# - index 变化时 point 必须归零；解析过程中 index 只增不减
# - 解析错误以 OptionError 返回值交付，调用方可以继续调用 step()
# - 一旦返回过 None（选项结束），后续调用保持返回 None，直到 set_index 重新启用

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from .errors import OptionError
from .option_spec import OptionSpec
from .types import Cursor, ParsedOption, ParseOutcome
from .utils.config import get_config
from .utils.logging import get_logger
from .utils.param_validation import (
    ensure_argument_vector,
    ensure_index,
    ensure_type,
    validate_arguments,
)

logger = get_logger(__name__)

PREFIX = "-"
TERMINATOR = "--"


class Parser:
    """
    Iterator over the options present in an argument vector.

    ``args[0]`` is taken to be the program name, so scanning starts at
    index 1. Call :meth:`set_index` before the first step if ``args`` is
    laid out differently.

    Example::

        >>> parser = Parser(["prog", "-abc", "foo"], "ab:c")
        >>> parser.step()
        ParsedOption(option='a', value=None)
        >>> parser.step()
        ParsedOption(option='b', value='c')
        >>> parser.step() is None
        True
        >>> parser.remaining()
        ['foo']
    """

    def __init__(self, args: Sequence[str], optstring: str):
        ensure_argument_vector(args)
        if get_config().strict_validation:
            ensure_type(optstring, (str,), label="optstring")
        self._args: Tuple[str, ...] = tuple(args)
        self._spec = OptionSpec(optstring)
        self._index = 1
        self._point = 0
        self._finished = False

    # Cursor accessors --------------------------------------------------------
    # point 必须在 index 改变时归零
    @property
    def index(self) -> int:
        """Index of the next argument to examine; the first operand once parsing is done."""
        return self._index

    def current_index(self) -> int:
        return self._index

    @validate_arguments({"value": ensure_index})
    def set_index(self, value: int) -> None:
        """
        Re-point the parser at ``args[value]``.

        Resets the intra-token offset and re-arms a parser that has already
        reported the end of options.
        """
        self._index = value
        self._point = 0
        self._finished = False

    def advance_index(self) -> None:
        """Move to the start of the next argument."""
        self._index += 1
        self._point = 0

    @property
    def cursor(self) -> Cursor:
        return Cursor(self._index, self._point)

    @property
    def spec(self) -> OptionSpec:
        return self._spec

    @property
    def args(self) -> Tuple[str, ...]:
        return self._args

    def remaining(self) -> List[str]:
        """Arguments from the current index onwards."""
        return list(self._args[self._index:])

    # Scanning ----------------------------------------------------------------
    def step(self) -> ParseOutcome:
        """
        Return the next option, an :class:`OptionError`, or ``None`` when no
        options remain.

        Errors are returned, not raised; the cursor has already moved past
        the offending character so the caller may keep stepping.
        """
        if self._finished:
            return None

        if self._point == 0 and not self._enter_token():
            self._finished = True
            return None

        token = self._args[self._index]
        char = token[self._point]
        self._point += 1
        at_end = self._point >= len(token)

        takes_argument = self._spec.expects_argument(char)
        if takes_argument is None:
            if at_end:
                self.advance_index()
            logger.debug("unknown option -%s", char)
            return OptionError.unknown_option(char)

        if not takes_argument:
            if at_end:
                self.advance_index()
            logger.debug("option -%s", char)
            return ParsedOption(char)

        if not at_end:
            # 当前 token 剩余部分整体作为参数值
            value = token[self._point:]
        else:
            self.advance_index()
            if self._index >= len(self._args):
                logger.debug("option -%s is missing its argument", char)
                return OptionError.missing_argument(char)
            value = self._args[self._index]
        self.advance_index()
        logger.debug("option -%s with value %r", char, value, extra={"optarg": value})
        return ParsedOption(char, value)

    def _enter_token(self) -> bool:
        # 位于 token 边界时判断是否仍处于选项区域；返回 False 表示选项结束
        if self._index >= len(self._args):
            return False
        token = self._args[self._index]
        if not token or token[0] != PREFIX or len(token) == 1:
            return False
        if token == TERMINATOR:
            logger.debug("terminator at index %d", self._index)
            self.advance_index()
            return False
        # 跳过开头的 '-'
        self._point = 1
        return True

    def __iter__(self) -> "Parser":
        return self

    def __next__(self) -> Union[ParsedOption, OptionError]:
        outcome = self.step()
        if outcome is None:
            raise StopIteration
        return outcome

    def __repr__(self) -> str:
        return (
            f"Parser(args={list(self._args)!r}, optstring={self._spec.optstring!r}, "
            f"index={self._index}, point={self._point})"
        )


def getopt(args: Sequence[str], optstring: str, start: int = 1) -> Tuple[List[ParsedOption], List[str]]:
    """
    Parse all options at once.

    Returns the recognised options and the remaining operands, in the
    manner of ``getopt.getopt``. The first parse error is raised as an
    :class:`OptionError`.
    """
    parser = Parser(args, optstring)
    parser.set_index(start)
    options: List[ParsedOption] = []
    for outcome in parser:
        if isinstance(outcome, OptionError):
            raise outcome
        options.append(outcome)
    return options, parser.remaining()

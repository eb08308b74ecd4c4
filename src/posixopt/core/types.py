"""
Shared value types produced by the parser.
"""
# 说明：解析器逐步产出的结果类型。
# 职责：
# - ParsedOption：一次被识别的选项出现（选项字符 + 可选的参数值）
# - Cursor：(index, point) 扫描位置的不可变快照，便于测试检查与比较
# - ParseOutcome：step() 的返回类型（选项 / 错误 / None 表示选项结束）

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from .errors import OptionError


@dataclass(frozen=True, order=True)
class ParsedOption:
    """
    One recognised option occurrence.

    - Configuration
      - option: The option character.
      - value: The attached value, or None for options that take none.

    - Usage Notes
      - Unpacks like the pairs of ``getopt.getopt``: ``opt, value = parsed``.
    """

    option: str
    value: Optional[str] = None

    def __iter__(self) -> Iterator[Optional[str]]:
        yield self.option
        yield self.value

    def __str__(self) -> str:
        return f"Opt({self.option!r}, {self.value!r})"

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def as_tokens(self) -> List[str]:
        # 还原为命令行中的 token 形式：["-a"] 或 ["-b", "value"]
        tokens = [f"-{self.option}"]
        if self.value is not None:
            tokens.append(self.value)
        return tokens


@dataclass(frozen=True)
class Cursor:
    """Scan position: token ``index`` and character offset ``point`` inside it."""

    index: int = 1
    point: int = 0

    @property
    def at_boundary(self) -> bool:
        return self.point == 0


ParseOutcome = Union[ParsedOption, OptionError, None]
# step() 的三种结果：识别出的选项、可恢复的解析错误、或 None（选项已结束）

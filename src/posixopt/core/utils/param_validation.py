"""
Reusable validation helpers and decorators for caller supplied parameters.
"""
# 说明：参数验证相关的辅助函数与装饰器，用于在解析器入口处统一检查调用方传入的参数。
# 职责：
# - ParamValidationError：专门用于参数校验失败的异常类型（区别于解析过程中的 OptionError）
# - ensure / ensure_type：轻量断言与类型检查
# - ensure_argument_vector / ensure_index：参数向量与游标下标的领域校验
# - validate_arguments：根据 schema 为函数参数应用验证/转换逻辑的装饰器
# 约定：
# - strict_validation 关闭时，领域校验直接放行，不做任何转换

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Mapping, Sequence, Tuple, Type

from .config import get_config


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的 ParamValidationError
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}")


def ensure_argument_vector(args: Any) -> Sequence[str]:
    """Check that ``args`` is a sequence of ``str`` (a bare string is rejected)."""
    if not get_config().strict_validation:
        return args
    ensure(
        isinstance(args, Sequence) and not isinstance(args, (str, bytes, bytearray)),
        "args must be a sequence of strings",
    )
    for position, arg in enumerate(args):
        ensure_type(arg, (str,), label=f"args[{position}]")
    return args


def ensure_index(value: Any) -> int:
    """Check that ``value`` can be used as a cursor index."""
    if not get_config().strict_validation:
        return value
    # bool 是 int 的子类，这里显式排除，避免 set_index(True) 之类的误用
    ensure(
        isinstance(value, int) and not isinstance(value, bool),
        "index must be an int",
    )
    ensure(value >= 0, f"index must be non-negative, got {value}")
    return value


def validate_arguments(schema: Mapping[str, Callable[[Any], Any]]) -> Callable:
    """
    Decorator validating arguments according to callables.

    Each validator receives the argument and should return the (possibly
    transformed) value or raise ParamValidationError. Parameters that were
    not supplied by the caller are left to their defaults.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            # 按函数签名绑定实参，这样位置参数与关键字参数可以统一处理
            bound = signature.bind(*args, **kwargs)
            for name, validator in schema.items():
                if name in bound.arguments:
                    bound.arguments[name] = validator(bound.arguments[name])
            return func(*bound.args, **bound.kwargs)

        return wrapper

    return decorator

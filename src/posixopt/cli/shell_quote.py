"""
Quoting of parsed arguments for re-use by a shell.

Responsibilities
  - Map shell names to one of four quoting conventions.
  - Wrap a string in single quotes, escaping what the target shell needs.
"""
# 说明：按目标 shell 的引用规则对字符串加引号，供命令行前端重新输出解析结果。
# 规则（结果始终以单引号包裹）：
# - Bourne（sh/bash/zsh 等）：' → '\''
# - C shell（csh/tcsh）：' 与空格 → '\<c>'
# - fish：' 与 \ → \<c>
# - rc（plan9）：' → ''

from __future__ import annotations

import enum
from typing import Dict, Optional


class ShellKind(enum.Enum):
    BOURNE = "sh"
    C = "csh"
    FISH = "fish"
    RC = "rc"


_SHELL_NAMES: Dict[str, ShellKind] = {
    **{name: ShellKind.BOURNE for name in ("ash", "bash", "dash", "ksh", "mksh", "sh", "zsh")},
    **{name: ShellKind.C for name in ("csh", "tcsh")},
    "fish": ShellKind.FISH,
    "plan9": ShellKind.RC,
    "rc": ShellKind.RC,
}

_TRANSLATIONS = {
    ShellKind.BOURNE: str.maketrans({"'": "'\\''"}),
    ShellKind.C: str.maketrans({"'": "'\\''", " ": "'\\ '"}),
    ShellKind.FISH: str.maketrans({"'": "\\'", "\\": "\\\\"}),
    ShellKind.RC: str.maketrans({"'": "''"}),
}


def resolve_shell(name: str) -> Optional[ShellKind]:
    """Return the quoting convention for ``name`` (case-insensitive), or None if unknown."""
    return _SHELL_NAMES.get(name.strip().lower())


def quote_for_shell(text: str, kind: ShellKind = ShellKind.BOURNE) -> str:
    return "'" + text.translate(_TRANSLATIONS[kind]) + "'"

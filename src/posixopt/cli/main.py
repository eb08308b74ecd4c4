"""
Command line front-end in the manner of getopt(1).

Parses its own options, then parses the remaining arguments against a
user supplied optstring and prints the result quoted for a shell::

    $ posixopt-getopt ab:c -ab foo bar
    -a -b 'foo' -- 'bar'

Exit status: 0 on success, 1 when the user's arguments do not match the
optstring, 2 when this program itself is invoked incorrectly.
"""
# 说明：演示用命令行前端，展示两阶段解析模式。
# 流程：
# - 第一阶段：用 "hn:s:" 解析自身选项（-h 帮助 / -n 报错名称 / -s 目标 shell）
# - 取第一个非选项参数作为 optstring
# - 第二阶段：新建 Parser 并通过 set_index 指向 optstring 之后的位置，解析用户参数
# - 输出：选项与值逐个加引号，随后输出 "--" 与剩余操作数

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from ..core import OptionError, Parser
from ..core.utils import configure_logging, get_logger
from .shell_quote import ShellKind, quote_for_shell, resolve_shell

logger = get_logger(__name__)

DEFAULT_NAME = "getopt"
OWN_OPTSTRING = "hn:s:"

EXIT_OK = 0
EXIT_EXTERNAL = 1
EXIT_INTERNAL = 2


class CliError(Exception):
    """Error reported on stderr; ``exit_code`` becomes the process status."""

    def __init__(self, message: str, exit_code: int = EXIT_INTERNAL):
        super().__init__(message)
        self.exit_code = exit_code


def program_name(argv: Sequence[str], default: str = DEFAULT_NAME) -> str:
    if not argv:
        return default
    return Path(argv[0]).stem or default


def print_usage(name: str, out: TextIO) -> None:
    print(f"Usage: {name} [-h] [-n name] [-s shell] optstring [args ...]", file=out)
    print(f"  -n name   report errors as 'name' (default '{name}')", file=out)
    print("  -s shell  use quoting conventions for shell (default 'sh')", file=out)
    print(file=out)
    print("  -h        display this help", file=out)


def run(argv: Sequence[str], out: TextIO) -> int:
    """Run the program against a full ``argv`` (program name included)."""
    name = program_name(argv)
    child_name = name
    shell = ShellKind.BOURNE

    # gather our own options
    opts = Parser(argv, OWN_OPTSTRING)
    for outcome in opts:
        if isinstance(outcome, OptionError):
            raise CliError(f"{name}: {outcome}")
        if outcome.option == "h":
            print_usage(name, out)
            return EXIT_OK
        if outcome.option == "n":
            child_name = outcome.value
        elif outcome.option == "s":
            requested = outcome.value.strip().lower()
            resolved = resolve_shell(requested)
            if resolved is None:
                raise CliError(f"{name}: unknown shell type: {requested}")
            shell = resolved

    if opts.index >= len(argv):
        raise CliError(f"{name}: missing optstring argument")
    optstring = argv[opts.index]
    logger.debug("optstring %r, quoting for %s", optstring, shell.value)

    # parse the user's options with a second parser over the same argv
    user_opts = Parser(argv, optstring)
    user_opts.set_index(opts.index + 1)
    parsed: List[str] = []
    for outcome in user_opts:
        if isinstance(outcome, OptionError):
            raise CliError(f"{child_name}: {outcome}", exit_code=EXIT_EXTERNAL)
        flag, *value = outcome.as_tokens()
        parsed.append(flag)
        parsed.extend(quote_for_shell(token, shell) for token in value)

    parsed.append("--")
    parsed.extend(quote_for_shell(arg, shell) for arg in user_opts.remaining())
    print(" ".join(parsed), file=out)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv
    configure_logging()
    try:
        return run(argv, sys.stdout)
    except CliError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())

"""
Property-based tests for the option parser state machine.
"""
# 说明：Parser.step() 扫描规则的属性测试。
# 覆盖：
# - 空串、单独的 "-"、非 "-" 开头的 token 立即结束扫描且不移动 index
# - "--" 结束扫描并使 index 恰好前进一位
# - 未知选项返回 UnknownOption 后可以继续扫描，不会卡死
# - 需要参数的选项：下一个 token 整体作为参数值；没有下一个 token 时返回 MissingArgument
# - 选项结束后重复调用保持返回 None 且游标不变
# - 任意输入下 index 单调不减、index 变化时 point 归零、扫描步数有上界

from hypothesis import assume, given, strategies as st

from posixopt import ErrorKind, OptionError, OptionSpec, ParsedOption, Parser
from strategies import (
    argument_vectors,
    arbitrary_tokens,
    non_option_tokens,
    option_chars,
    option_tables,
    optstrings,
    to_optstring,
)


# ------------------------------------------------------------------ Termination rules
@given(non_option_tokens(), st.lists(arbitrary_tokens(), max_size=4), optstrings())
def test_non_option_token_ends_scan_without_moving(token, rest, optstring):
    # 当前 token 不是选项时直接返回 None，index 保持不变
    parser = Parser(["prog", token] + rest, optstring)
    assert parser.step() is None
    assert parser.index == 1


@given(st.lists(arbitrary_tokens(), max_size=4), optstrings())
def test_terminator_advances_index_by_one(rest, optstring):
    parser = Parser(["prog", "--"] + rest, optstring)
    assert parser.step() is None
    assert parser.index == 2
    assert parser.remaining() == rest


@given(argument_vectors(), optstrings(), st.integers(min_value=1, max_value=5))
def test_end_of_options_is_sticky(args, optstring, extra_calls):
    # 选项结束后重复调用 step() 不再产生任何副作用
    parser = Parser(args, optstring)
    while parser.step() is not None:
        pass
    cursor = parser.cursor
    for _ in range(extra_calls):
        assert parser.step() is None
        assert parser.cursor == cursor


# ------------------------------------------------------------------ Error recovery
@given(option_tables(), option_chars(), st.lists(arbitrary_tokens(), max_size=3))
def test_unknown_option_is_recoverable(table, char, rest):
    assume(char not in table)
    parser = Parser(["prog", "-" + char] + rest, to_optstring(table))
    outcome = parser.step()
    assert outcome == OptionError(ErrorKind.UNKNOWN_OPTION, char)
    # 出错字符位于 token 末尾，游标已经移动到下一个 token 的起点
    assert parser.cursor.index == 2
    assert parser.cursor.point == 0


@given(option_tables(min_size=1), st.data())
def test_argument_option_takes_whole_next_token(table, data):
    takes = [char for char, flag in table.items() if flag]
    assume(takes)
    char = data.draw(st.sampled_from(takes))
    value = data.draw(st.text(max_size=8))
    parser = Parser(["prog", "-" + char, value, "operand"], to_optstring(table))
    assert parser.step() == ParsedOption(char, value)
    assert parser.index == 3


@given(option_tables(min_size=1), st.data())
def test_argument_option_at_end_of_vector_is_missing(table, data):
    takes = [char for char, flag in table.items() if flag]
    assume(takes)
    char = data.draw(st.sampled_from(takes))
    parser = Parser(["prog", "-" + char], to_optstring(table))
    assert parser.step() == OptionError(ErrorKind.MISSING_ARGUMENT, char)
    assert parser.step() is None
    assert parser.index == 2


# ------------------------------------------------------------------ Cursor invariants
@given(argument_vectors(), optstrings())
def test_scan_is_forward_only_and_bounded(args, optstring):
    parser = Parser(args, optstring)
    # 每一步至少消耗一个字符，因此步数不会超过字符总数
    budget = sum(len(arg) for arg in args) + 1
    previous = parser.cursor
    for _ in range(budget):
        outcome = parser.step()
        current = parser.cursor
        assert current.index >= previous.index
        if current.index != previous.index:
            assert current.point == 0
        if outcome is None:
            break
        assert isinstance(outcome, (ParsedOption, OptionError))
        previous = current
    else:
        raise AssertionError("parser did not reach the end of options")


@given(argument_vectors(), optstrings())
def test_every_recognised_option_is_in_spec(args, optstring):
    parser = Parser(args, optstring)
    spec = OptionSpec(optstring)
    for outcome in parser:
        if isinstance(outcome, ParsedOption):
            assert outcome.option in spec
            # 需要参数的选项一定带值，不需要参数的一定不带值
            assert outcome.has_value is spec[outcome.option]
        else:
            assert (outcome.culprit in spec) is (outcome.kind is ErrorKind.MISSING_ARGUMENT)

"""リンタのルールのテスト"""
import pytest

from ddl_lint.schema_toolkit import ColumnStructure, ColumnType, TableStructure
from ddl_lint.linter.rules import (
    MIN_LENGTH, DEFAULT_RULES, LintRule,
    check_duplicate_col_names, check_table_name_is_not_short,
    get_rule, build_rules
)



def make_table(name:str, *column_names:str) -> TableStructure:
    """指定された名前のテーブルを作成する (カラムの型はすべてDate)"""
    return TableStructure(
        name=name,
        columns=tuple(ColumnStructure(c, ColumnType.DATE) for c in column_names)
    )


#
# カラム名の重複
#

def test_duplicate_col_names() -> None:
    """重複したカラム名が報告されることを確認する"""
    table = make_table("mytable", "x", "x")
    assert check_duplicate_col_names(table) == \
        "Duplicated column x was encountered 2 times.\n"

def test_duplicate_col_names_order() -> None:
    """複数の重複がカラムの出現順に報告されることを確認する"""
    table = make_table("mytable", "b", "a", "c", "b", "a", "a")
    assert check_duplicate_col_names(table) == (
        "Duplicated column b was encountered 2 times.\n"
        "Duplicated column a was encountered 3 times.\n"
    )

@pytest.mark.parametrize("column_names", [
    (),
    ("x",),
    ("x", "y", "z"),
    # 大文字小文字が異なる場合は別のカラムとして扱う
    ("x", "X"),
])
def test_duplicate_col_names_distinct(column_names) -> None:
    """カラム名が重複していない場合は何も報告されないことを確認する"""
    assert check_duplicate_col_names(make_table("mytable", *column_names)) is None


#
# テーブル名の長さ
#

def test_table_name_is_short() -> None:
    """短いテーブル名が報告されることを確認する"""
    assert check_table_name_is_not_short(make_table("t", "a")) == \
        "Your table name 't' is too short. We recommend at least 5 characters."

@pytest.mark.parametrize("name", ["table", "longname", "表名"])
def test_table_name_is_not_short(name) -> None:
    """5バイト以上のテーブル名は報告されないことを確認する"""
    assert check_table_name_is_not_short(make_table(name)) is None

def test_table_name_length_in_bytes() -> None:
    """テーブル名の長さが文字数ではなくバイト数で判定されることを確認する"""
    # 1文字 = 3バイト
    assert check_table_name_is_not_short(make_table("表")) is not None
    # 2文字 = 6バイト
    assert check_table_name_is_not_short(make_table("表名")) is None

def test_table_name_min_length() -> None:
    """最小長を変更できることを確認する"""
    table = make_table("users")
    assert check_table_name_is_not_short(table, min_length=8) == \
        "Your table name 'users' is too short. We recommend at least 8 characters."
    assert check_table_name_is_not_short(table, min_length=MIN_LENGTH) is None


#
# ルールの性質
#

@pytest.mark.parametrize("table", [
    make_table("t", "x", "x"),
    make_table("mytable", "x", "y"),
    make_table("t"),
])
def test_rules_are_pure(table) -> None:
    """同じテーブルに対して同じ結果を返し、テーブルを変更しないことを確認する"""
    before = (table.name, table.columns, table.if_not_exists)
    for rule in DEFAULT_RULES:
        assert rule(table) == rule(table)
    assert (table.name, table.columns, table.if_not_exists) == before


#
# ルールの取得・構築
#

def test_default_rules_order() -> None:
    """デフォルトのルールの順序を確認する"""
    assert [r.name for r in DEFAULT_RULES] == ["duplicate_column_names", "short_table_name"]

def test_get_rule() -> None:
    """名前からルールを取得できることを確認する"""
    assert get_rule("short_table_name").check is check_table_name_is_not_short
    with pytest.raises(KeyError):
        get_rule("unknown_rule")

def test_build_rules_default() -> None:
    """デフォルトの設定ではDEFAULT_RULESと同じ結果となることを確認する"""
    rules = build_rules()
    assert [r.name for r in rules] == [r.name for r in DEFAULT_RULES]

    table = make_table("t", "x", "x")
    assert [r(table) for r in rules] == [r(table) for r in DEFAULT_RULES]
    assert rules[1](table) == \
        f"Your table name 't' is too short. We recommend at least {MIN_LENGTH} characters."

def test_build_rules_disabled() -> None:
    """無効にしたルールが含まれないことを確認する"""
    rules = build_rules(disabled=["duplicate_column_names"])
    assert [r.name for r in rules] == ["short_table_name"]

    with pytest.raises(KeyError):
        build_rules(disabled=["unknown_rule"])

def test_build_rules_min_length() -> None:
    """最小長の設定がshort_table_nameに反映されることを確認する"""
    rules = build_rules(min_length=8)
    rule = next(r for r in rules if r.name == "short_table_name")
    assert rule(make_table("mytable")) == \
        "Your table name 'mytable' is too short. We recommend at least 8 characters."

def test_lint_rule_call() -> None:
    """LintRuleを関数として呼び出せることを確認する"""
    rule = LintRule("always", lambda table: f"checked {table.name}")
    assert rule(make_table("users")) == "checked users"

def test_lint_rule_configure() -> None:
    """optionsに含まれる設定のみがルールに渡されることを確認する"""
    def _check(table, suffix="!"):
        return f"{table.name}{suffix}"

    rule = LintRule("suffixed", _check, ("suffix",))
    configured = rule.configure(suffix="?", min_length=8)
    assert configured.name == "suffixed"
    assert configured.options == ("suffix",)
    assert configured(make_table("users")) == "users?"

    # 設定を受け付けないルールはそのまま返す
    plain = get_rule("duplicate_column_names")
    assert plain.configure(min_length=8) is plain

"""DDLCheckerのテスト"""
import pytest

from ddl_lint.checker import DDLChecker, DDLCheckerConfig, LogLevel
from ddl_lint.linter import LintOutcome
from ddl_lint.status import errors as ie
from ddl_lint.status import warnings as iw
from ddl_lint.status.progress import ProgressStatus



@pytest.fixture
def config(tmp_path) -> DDLCheckerConfig:
    """一時ディレクトリをアプリケーションのディレクトリとする設定"""
    return DDLCheckerConfig(str(tmp_path))


def test_run_clean(config):
    """問題のないテーブルに対する実行のテスト"""
    with DDLChecker(config) as checker:
        assert checker.is_initialized is True
        assert checker.run("CREATE TABLE table (my_date Date, my_string String)") is None
        assert checker.is_completed is True
        assert checker.has_error is False
        assert checker.report.outcome == LintOutcome.CLEAN
        assert checker.report.table.name == "table"

def test_run_dirty(config):
    """リンタの報告はエラーとして扱われないことを確認する"""
    with DDLChecker(config) as checker:
        assert checker.run("CREATE TABLE t (x Date, x String)") is None
        assert checker.is_completed is True
        assert checker.report.outcome == LintOutcome.DIRTY
        assert len(checker.report.findings) == 2

def test_run_parse_error(config):
    """解析に失敗した場合はParseFailedが返され、リンタが実行されないことを確認する"""
    with DDLChecker(config) as checker:
        err = checker.run("CREATE TABLE t(a Date)")
        assert isinstance(err, ie.ParseFailed)
        assert err.status == ProgressStatus.PARSING
        assert err.exception_name == "SQLParseError"
        assert err.residual == "Date)"
        assert checker.current_error is err
        assert checker.has_error is True
        assert checker.is_completed is False
        assert checker.report is None

def test_run_trailing_input(config):
    """閉じ括弧の後の入力は警告となり、リンタは実行されることを確認する"""
    with DDLChecker(config) as checker:
        assert checker.run("CREATE TABLE users (joined Date);") is None
        warnings = checker.issued_warnings
        assert len(warnings) == 1
        assert isinstance(warnings[0], iw.TrailingInputIgnored)
        assert checker.report.is_clean is True

def test_run_again_resets_state(config):
    """再実行時に前回のエラー・警告・結果がリセットされることを確認する"""
    with DDLChecker(config) as checker:
        checker.run("CREATE TABLE users (joined Date) trailing")
        checker.run("not a statement")
        assert checker.has_error is True
        assert checker.issued_warnings == []

        assert checker.run("CREATE TABLE users (joined Date)") is None
        assert checker.has_error is False
        assert checker.report.is_clean is True

def test_disabled_rules(config):
    """設定で無効にしたルールが実行されないことを確認する"""
    config.disabled_rules = ["short_table_name"]
    with DDLChecker(config) as checker:
        assert [r.name for r in checker.rules] == ["duplicate_column_names"]
        checker.run("CREATE TABLE t (a Date)")
        assert checker.report.is_clean is True

def test_min_table_name_length(config):
    """設定したテーブル名の最小長が使用されることを確認する"""
    config.min_table_name_length = 2
    with DDLChecker(config) as checker:
        checker.run("CREATE TABLE ab (a Date)")
        assert checker.report.is_clean is True


#
# 想定外のエラー
#

def test_unexpected_error(config, monkeypatch):
    """想定外のエラーがUnexpectedErrorとして返されることを確認する"""
    def _raise(*args, **kwargs):
        raise RuntimeError("boom")
    monkeypatch.setattr("ddl_lint.checker.checker.run_linters", _raise)

    with DDLChecker(config) as checker:
        err = checker.run("CREATE TABLE users (joined Date)")
        assert isinstance(err, ie.UnexpectedError)
        assert err.exception_name == "RuntimeError"
        assert err.args == "boom"
        assert err.status == ProgressStatus.LINTING
        assert "RuntimeError: boom" in err.error_message()
        assert checker.report is None

def test_unexpected_error_while_parsing(config, monkeypatch, tmp_path):
    """解析中の想定外のエラーには解析処理のステータスが付与されることを確認する"""
    def _raise(*args, **kwargs):
        raise RuntimeError("boom")
    monkeypatch.setattr("ddl_lint.checker.checker.parse_table", _raise)

    log_path = tmp_path / "lint.log"
    config.log_path = str(log_path)
    with DDLChecker(config) as checker:
        err = checker.run("CREATE TABLE users (joined Date)")
        assert isinstance(err, ie.UnexpectedError)
        assert err.status == ProgressStatus.PARSING

    error_lines = [line for line in log_path.read_text(encoding="utf-8").splitlines()
                   if line.startswith("[ERROR]")]
    assert error_lines
    assert all("PARSING," in line for line in error_lines)

def test_unexpected_error_not_caught(config, monkeypatch):
    """catch_errors_on_runがFalseの場合は例外がそのまま送出されることを確認する"""
    def _raise(*args, **kwargs):
        raise RuntimeError("boom")
    monkeypatch.setattr("ddl_lint.checker.checker.run_linters", _raise)

    config.catch_errors_on_run = False
    with DDLChecker(config) as checker:
        with pytest.raises(RuntimeError):
            checker.run("CREATE TABLE users (joined Date)")

def test_initialization_error(config, monkeypatch):
    """初期化に失敗した場合、run()は初期化時のエラーを返すことを確認する"""
    def _raise(*args, **kwargs):
        raise RuntimeError("init failed")
    monkeypatch.setattr("ddl_lint.checker.checker.build_rules", _raise)

    checker = DDLChecker(config)
    assert checker.is_initialized is False
    assert isinstance(checker.current_error, ie.UnexpectedError)
    assert checker.run("CREATE TABLE users (joined Date)") is checker.current_error
    checker.cleanup()


#
# ログ出力
#

def test_log_file(config, tmp_path):
    """ログファイルに各処理のログが出力されることを確認する"""
    log_path = tmp_path / "logs" / "lint.log"
    config.log_path = str(log_path)
    with DDLChecker(config) as checker:
        checker.run("CREATE TABLE t (a Date)")

    text = log_path.read_text(encoding="utf-8")
    assert "[INFO]" in text
    for status in ProgressStatus:
        assert status.name in text
    assert "short_table_name: Your table name 't' is too short." in text

def test_log_level(config, tmp_path):
    """設定したレベル未満のログが出力されないことを確認する"""
    log_path = tmp_path / "lint.log"
    config.log_path = str(log_path)
    config.log_level = LogLevel.ERROR
    with DDLChecker(config) as checker:
        checker.run("CREATE TABLE users (joined Date)")
        checker.run("CREATE TABLE t(a Date)")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("[ERROR]")
    assert "Failed to parse" in lines[0]

def test_invalid_log_path(config, tmp_path):
    """ログファイルのパスが不正な場合はデフォルトのパスに出力されることを確認する"""
    (tmp_path / "not_a_dir").write_text("")
    config.log_path = str(tmp_path / "not_a_dir" / "sub" / "lint.log")
    with DDLChecker(config) as checker:
        checker.run("CREATE TABLE users (joined Date)")

    text = (tmp_path / "ddl_lint.log").read_text(encoding="utf-8")
    assert "[WARNING]" in text
    assert "is invalid" in text

def test_no_log_file_by_default(config, tmp_path):
    """デフォルトの設定ではファイルが作成されないことを確認する"""
    with DDLChecker(config) as checker:
        checker.run("CREATE TABLE users (joined Date)")
    assert list(tmp_path.iterdir()) == []

def test_logging_to_console(config, capsys):
    """コンソールへのログは標準エラー出力に出力されることを確認する"""
    config.logging_to_console = True
    with DDLChecker(config) as checker:
        checker.run("CREATE TABLE users (joined Date)")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[INFO]" in captured.err

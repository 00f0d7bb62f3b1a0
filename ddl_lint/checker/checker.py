"""
CREATE TABLE文を解析し、リンタを実行するクラス

Classes
-------
- `DDLChecker`: CREATE TABLE文を解析し、リンタを実行するクラス

Usage
-----

1a. with文を使用する場合

```python
from ddl_lint.checker import DDLChecker

with DDLChecker() as checker:
    if (err := checker.run("CREATE TABLE users (joined Date)")) is None:
        print(checker.report.render(), end="")
```

1b. with文を使用しない場合

```python
from ddl_lint.checker import DDLChecker

checker = DDLChecker()
checker.run("CREATE TABLE users (joined Date)")

# 終了時にcleanup()を呼び出す
checker.cleanup()
```

2. 設定ファイルを読み込む場合

```python
from ddl_lint.checker import DDLChecker, load_config

# app_dir にある ddl_lint.toml を読み込む
# 存在しない場合はデフォルトの設定を使用
config = load_config(app_dir="C:/path/to/app_dir")

with DDLChecker(config) as checker:
    checker.run(sql)
```
"""
import traceback
from typing import Optional, Union

from ddl_lint.linter import LintReport, LintRule, build_rules, run_linters
from ddl_lint.schema_toolkit import SQLParseError, TableStructure, parse_table
from ddl_lint.status import errors as ie
from ddl_lint.status import warnings as iw
from ddl_lint.status.progress import ProgressStatus, get_progress_status_msg
from .checker_config import DDLCheckerConfig, LogLevel
from ._logger import Logger



class DDLChecker:
    """
    CREATE TABLE文を解析し、リンタを実行するクラス

    Properties
    ----------
    report : Optional[LintReport]
        直近の実行結果、解析に失敗した場合や未実行の場合はNone
    current_error : Optional[ie.DDLErrorData]
        現在のエラー情報を取得する、エラーが発生していない場合はNone
    has_error : bool
        エラーが発生しているかどうか
    is_completed : bool
        直近の実行が完了したかどうか、中断された場合はFalse
    issued_warnings : list[iw.DDLWarningData]
        直近の実行中に発生した警告
    """

    def __init__(self, config:Optional[DDLCheckerConfig]=None):
        """Constructor

        Parameters
        ----------
        config : Optional[DDLCheckerConfig], default None
            コンフィグ、Noneの場合はデフォルトの設定
        """
        self.config = DDLCheckerConfig() if config is None else config

        # 変数の初期化
        self._logger = Logger(self.config.default_log_path)
        """ロガー"""
        self._rules: list[LintRule] = []
        """実行するルール"""
        self._report: Optional[LintReport] = None
        """直近の実行結果"""
        self._current_error: Optional[ie.DDLErrorData] = None
        """現在のエラー情報"""
        self._completed = False
        """直近の実行が完了したかどうか、中断された場合もFalse"""
        self._is_initialized = False
        """初期化処理が完了したかどうか"""
        self._status = ProgressStatus.INITIALIZING
        """現在の処理"""
        self._issued_warnings: list[iw.DDLWarningData] = []
        """実行中に発生した警告のログ"""

        # 初期化処理
        if (err:=self._initialize()):
            self.cancel(err)

    def __enter__(self) -> "DDLChecker":
        return self

    def __exit__(self, exc_type, exc_value, traceback_) -> None:
        self.cleanup()

    #
    # 初期化処理関連
    #

    def _initialize_inner(self) -> Optional[ie.DDLErrorData]:
        """初期化処理の具体的な処理、UnexpectedErrorをキャッチしない

        Returns
        -------
        Optional[ie.DDLErrorData]
            エラー情報、エラーが発生していない場合はNone
        """
        self._init_logger()
        self._init_rules()

        self._log(ProgressStatus.INITIALIZING,
                  f"Initialized with {len(self._rules)} rule(s): " \
                  f"{', '.join(r.name for r in self._rules)}")
        self._is_initialized = True

    def _initialize(self) -> Optional[ie.DDLErrorData]:
        """初期化処理

        Returns
        -------
        Optional[ie.DDLErrorData]
            エラー情報、エラーが発生していない場合はNone
        """
        if not self.config.catch_errors_on_run:
            # デバッグ用: 想定外のエラー(UNEXPECTED_ERROR)をキャッチしない
            return self._initialize_inner()

        try:
            return self._initialize_inner()
        except Exception as e:
            return ie.UnexpectedError(e, ProgressStatus.INITIALIZING)

    def _init_logger(self) -> None:
        """ロガーの初期化 (出力先など)"""
        s = self._logger.init_logger(self.config.log_path, self.config.log_encoding,
                                     init_log = self.config.log_init=="ALWAYS_ON_STARTUP",
                                     logging_to_console=self.config.logging_to_console,
                                     level=self.config.log_level)

        # LOG_PATHが不正な場合はWarningを出力
        if not s:
            self._update_issue(iw.InvalidLogFilePath(self.config.log_path))

        self._log(ProgressStatus.INITIALIZING,
                  get_progress_status_msg(ProgressStatus.INITIALIZING))

    def _init_rules(self) -> None:
        """実行するルールの初期化"""
        self._rules = build_rules(self.config.min_table_name_length,
                                  self.config.disabled_rules)

    #
    # 状態
    #

    def _log(self, status:ProgressStatus, message:str,
             level:LogLevel=LogLevel.INFO) -> None:
        self._logger.log(status, message, level)

    def _update_issue(self, issue:Union[ie.DDLErrorData, iw.DDLWarningData]) -> None:
        """エラー・警告の記録

        Parameters
        ----------
        issue : ie.DDLErrorData | iw.DDLWarningData
            エラー情報、または警告情報
        """
        if isinstance(issue, ie.DDLErrorData):
            self._current_error = issue
            self._log(issue.status, issue.error_message(), LogLevel.ERROR)
        else:
            self._issued_warnings.append(issue)
            self._log(issue.status, issue.warning_message(), LogLevel.WARNING)

    @property
    def report(self) -> Optional[LintReport]:
        """直近の実行結果

        Returns
        -------
        Optional[LintReport]
            リンタの実行結果、解析に失敗した場合や未実行の場合はNone
        """
        return self._report

    @property
    def rules(self) -> list[LintRule]:
        """実行するルール"""
        return list(self._rules)

    @property
    def current_error(self) -> Optional[ie.DDLErrorData]:
        """現在のエラー情報

        Returns
        -------
        Optional[ie.DDLErrorData]
            エラー情報、エラーが発生していない場合はNone
        """
        return self._current_error

    @property
    def has_error(self) -> bool:
        """エラーが発生しているかどうか"""
        return self._current_error is not None

    @property
    def is_completed(self) -> bool:
        """直近の実行が完了したかどうか"""
        return self._completed

    @property
    def is_initialized(self) -> bool:
        """初期化処理が完了したかどうか"""
        return self._is_initialized

    @property
    def issued_warnings(self) -> list[iw.DDLWarningData]:
        """直近の実行中に発生した警告

        Returns
        -------
        list[iw.DDLWarningData]
            警告情報のリスト
        """
        return list(self._issued_warnings)

    #
    # メイン処理
    #

    def cancel(self, error:ie.DDLErrorData) -> Optional[ie.DDLErrorData]:
        """処理をキャンセルする

        Parameters
        ----------
        error : ie.DDLErrorData
            キャンセルの理由となるエラー情報

        Returns
        -------
        ie.DDLErrorData
            エラー情報
        """
        self._completed = False
        self._report = None
        self._update_issue(error)

        return self.current_error

    def _parse(self, sql:str) -> Union[TableStructure, ie.DDLErrorData]:
        """CREATE TABLE文の解析

        Returns
        -------
        TableStructure | ie.DDLErrorData
            解析結果、解析に失敗した場合はエラー情報
        """
        self._log(ProgressStatus.PARSING, get_progress_status_msg(ProgressStatus.PARSING))

        try:
            table, rest = parse_table(sql)
        except SQLParseError as e:
            return ie.ParseFailed(e.residual, e)

        if rest:
            # 閉じ括弧以降の入力は無視する
            self._update_issue(iw.TrailingInputIgnored(rest))

        self._log(ProgressStatus.PARSING,
                  f"Parsed table '{table.name}' with {len(table.columns)} column(s)")
        return table

    def _run(self, sql:str) -> Optional[ie.DDLErrorData]:
        """メイン処理

        Returns
        -------
        Optional[ie.DDLErrorData]
            エラー情報、エラーが発生していない場合はNone
        """
        if not self.is_initialized:
            # 初期化に失敗している場合は初期化時のエラーを返す
            return self.current_error

        # 解析
        self._status = ProgressStatus.PARSING
        if isinstance(res := self._parse(sql), ie.DDLErrorData):
            return self.cancel(res)

        # リンタの実行
        self._status = ProgressStatus.LINTING
        self._log(ProgressStatus.LINTING, get_progress_status_msg(ProgressStatus.LINTING))
        report = run_linters(res, self._rules)
        for finding in report.findings:
            self._log(ProgressStatus.LINTING,
                      f"{finding.rule_name}: {finding.message.rstrip()}")

        self._report = report
        self._completed = True
        self._log(ProgressStatus.TERMINATING,
                  f"Lint finished: {report.outcome.name} ({len(report.findings)} finding(s))")

    def run(self, sql:str) -> Optional[ie.DDLErrorData]:
        """CREATE TABLE文を解析し、リンタを実行する

        Parameters
        ----------
        sql : str
            CREATE TABLE文

        Returns
        -------
        Optional[ie.DDLErrorData]
            エラー情報、エラーが発生していない場合はNone
            リンタの結果は `.report` から取得する

        Notes
        -----
        - `catch_errors_on_run`が`True`の場合、想定外のエラーはUnexpectedErrorとして返す
        """
        if self.is_initialized:
            # 前回の実行結果をリセット
            self._current_error = None
            self._report = None
            self._completed = False
            self._issued_warnings = []

        if not self.config.catch_errors_on_run:
            # デバッグ用: 想定外のエラー(UNEXPECTED_ERROR)をキャッチしない
            return self._run(sql)

        try:
            return self._run(sql)
        except Exception as e:
            tr = traceback.format_exc()
            self._log(self._status, tr, LogLevel.ERROR)
            return self.cancel(ie.UnexpectedError(e, self._status))

    def cleanup(self) -> None:
        """終了処理"""
        self._log(ProgressStatus.TERMINATING,
                  get_progress_status_msg(ProgressStatus.TERMINATING))

"""
ログ出力モジュール

Classes
-------
- `Logger` : ロガー
"""
import datetime
import sys
from os import path, makedirs

from ddl_lint.status.progress import ProgressStatus, MAX_STATUS_LENGTH
from .checker_config import LogLevel, MAX_LOG_LEVEL_LENGTH



class Logger:
    """ロガー"""
    def __init__(self, default_log_path:str):
        """ロガーの初期化

        Parameters
        ----------
        default_log_path : str
            ログファイルのデフォルトのパス
            .init_logger()で指定されたパスが不正な場合に使用する。
        """
        self._path = None
        self._encoding = "utf-8"
        self._logging_to_console = False
        self._level = LogLevel.INFO
        self._default_log_path = default_log_path

    @property
    def path(self):
        """ログファイルのパス、ログを出力しない場合はNone"""
        return self._path

    def init_logger(self, log_path:str, encoding:str="utf-8",
                    init_log:bool=False, logging_to_console:bool=False,
                    level:LogLevel=LogLevel.INFO) -> bool:
        """ロガーの初期化

        Parameters
        ----------
        log_path : str
            ログファイルのパス、空文字列の場合はファイルに出力しない
        encoding : str, default "utf-8"
            ログファイルのエンコーディング
        init_log : bool, default False
            ログファイルを初期化するかどうか
        logging_to_console : bool, default False
            標準エラー出力にもログを出力するかどうか
        level : LogLevel, default LogLevel.INFO
            出力するログの最低レベル

        Returns
        -------
        bool
            指定されたパスでのログファイルの初期化が成功したかどうか
        """
        self._encoding = encoding
        self._logging_to_console = logging_to_console
        self._level = level

        if not log_path:
            self._path = None
            return True

        success = True
        try:
            # ログファイルのディレクトリが存在しない場合は作成
            if (log_dir := path.dirname(log_path)) and not path.exists(log_dir):
                makedirs(log_dir)
            self._path = log_path
        except OSError:
            # アクセス権限がない場合などはデフォルトのログファイルパスを使用
            success = False
            self._path = self._default_log_path

        if init_log and path.exists(self._path):
            # ログファイルを初期化
            with open(self._path, "w", encoding=encoding) as f:
                f.write("")

        return success

    def log(self, status:ProgressStatus, message:str,
            level:LogLevel=LogLevel.INFO) -> bool:
        """ログの出力

        Parameters
        ----------
        status : ProgressStatus
            進捗ステータス
        message : str
            ログメッセージ
        level : LogLevel, default LogLevel.INFO
            ログのレベル

        Returns
        -------
        bool
            ログの出力が成功したかどうか
        """
        if level.value < self._level.value:
            return False

        text = (f"[{level.name}]".ljust(MAX_LOG_LEVEL_LENGTH+3)
               + f"{datetime.datetime.now().strftime('%Y/%m/%d %H:%M:%S')}, "
               + f"{status.name},".ljust(MAX_STATUS_LENGTH+2)
               + message)

        if self._logging_to_console:
            # 標準出力はリンタの結果のみを出力する
            print(text, file=sys.stderr)

        if self._path is None:
            return self._logging_to_console

        try:
            with open(self._path, "a", encoding=self._encoding) as f:
                f.write(text + "\n")
        except OSError:
            return False
        return True

"""
ddl_lint.status.warnings

警告情報を提供するモジュール

Classes
-------
- `DDLWarningData` : 警告情報 (抽象クラス)
- `InvalidLogFilePath` : ログファイルのパスが不正な場合の警告情報
- `TrailingInputIgnored` : CREATE TABLE文の後に余分な入力がある場合の警告情報
"""
from abc import ABCMeta, abstractmethod
from copy import deepcopy

from .progress import ProgressStatus



class DDLWarningData(metaclass=ABCMeta):
    """警告情報

    Attributes
    ----------
    status : ProgressStatus
        警告が発生した処理
    """
    status: ProgressStatus = ProgressStatus.INITIALIZING

    def __init__(self):
        self._details: dict = {}

    @property
    def name(self) -> str:
        """警告名"""
        return self.__class__.__name__

    def asdict(self) -> dict:
        """警告情報を辞書形式で取得

        Returns
        -------
        dict
            警告情報
        """
        return deepcopy(self._details)

    @abstractmethod
    def warning_message(self) -> str:
        """警告メッセージの取得

        Returns
        -------
        str
            警告メッセージ
        """



#
# ファイルパス
#

class InvalidLogFilePath(DDLWarningData):
    """指定されたログファイルのパスが不正な場合の警告情報"""
    def __init__(self, file_path:str):
        """指定されたログファイルのパスが不正な場合の警告情報

        Parameters
        ----------
        file_path : str
            ログファイルのパス
        """
        super().__init__()
        self._details["file_path"] = file_path

    def warning_message(self) -> str:
        return f"The log file path ({self._details['file_path']}) is invalid. " \
               "The default log file is used instead."



#
# 解析
#

class TrailingInputIgnored(DDLWarningData):
    """CREATE TABLE文の閉じ括弧の後に余分な入力がある場合の警告情報"""
    status = ProgressStatus.PARSING

    def __init__(self, trailing:str):
        """CREATE TABLE文の閉じ括弧の後に余分な入力がある場合の警告情報

        Parameters
        ----------
        trailing : str
            閉じ括弧の後の入力
        """
        super().__init__()
        self._details["trailing"] = trailing

    def warning_message(self) -> str:
        return "Input after the closing parenthesis was ignored: " \
               f"{self._details['trailing'][:40]!r}"

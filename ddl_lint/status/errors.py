"""
ddl_lint.status.errors
エラー情報を提供するモジュール

Classes
-------
- `DDLErrorData` : エラー情報 (抽象クラス)
- `ParseFailed` : CREATE TABLE文の解析に失敗した場合のエラー情報
- `UnexpectedError` : 未知のエラーが発生した場合のエラー情報
"""
from abc import ABCMeta, abstractmethod
from copy import deepcopy
from typing import Optional, Union

from .progress import ProgressStatus



class DDLErrorData(metaclass=ABCMeta):
    """エラー情報

    Attributes
    ----------
    status : ProgressStatus
        エラーが発生した処理
    """
    status: ProgressStatus = ProgressStatus.INITIALIZING

    def __init__(self, e:Union[Exception, str, None]=None):
        """コンストラクタ

        Parameters
        ----------
        e : Exception | str | None
            例外、またはエラーメッセージ
        """
        self._details: dict = {}

        if e is None:
            # e が None の場合はエラー情報を空にする
            return

        if isinstance(e, str):
            e_name = "UnexpectedError"
            e_args = e
        else:
            e_name = e.__class__.__name__
            e_args = e.args[0] if e.args else ""

        self._details["e"] = {
            "exception_name": e_name,
            "args": e_args
        }

    @property
    def exception_name(self) -> Optional[str]:
        """例外名"""
        if "e" not in self._details:
            return None
        return self._details["e"]["exception_name"]

    @property
    def args(self) -> Optional[str]:
        """例外の引数"""
        if "e" not in self._details:
            return None
        return self._details["e"]["args"]

    @property
    def name(self) -> str:
        """エラー名"""
        return self.__class__.__name__

    def asdict(self) -> dict:
        """エラー情報を辞書形式で取得

        Returns
        -------
        dict
            エラー情報
        """
        return deepcopy(self._details)

    @abstractmethod
    def error_message(self) -> str:
        """エラーメッセージの取得

        Returns
        -------
        str
            エラーメッセージ
        """

class UnexpectedError(DDLErrorData):
    """未知のエラーが発生した場合のエラー情報"""

    def __init__(self, e:Union[Exception, str, None]=None,
                 status:ProgressStatus=ProgressStatus.INITIALIZING):
        """未知のエラーが発生した場合のエラー情報

        Parameters
        ----------
        e : Exception | str | None
            例外、またはエラーメッセージ
        status : ProgressStatus, default ProgressStatus.INITIALIZING
            エラーが発生した処理
        """
        super().__init__(e)
        self.status = status

    def error_message(self) -> str:
        if self.exception_name is None:
            return "An unexpected error occurred."

        return "An unexpected error occurred: " \
               f"{self.exception_name}: {self.args}"



#
# 解析
#

class ParseFailed(DDLErrorData):
    """CREATE TABLE文の解析に失敗した場合のエラー情報"""
    status = ProgressStatus.PARSING

    def __init__(self, residual:str, e:Union[Exception, str, None]=None):
        """CREATE TABLE文の解析に失敗した場合のエラー情報

        Parameters
        ----------
        residual : str
            解析できなかった部分の入力
        e : Exception | str | None
            例外、またはエラーメッセージ
        """
        super().__init__(e)
        self._details["residual"] = residual

    @property
    def residual(self) -> str:
        """解析できなかった部分の入力"""
        return self._details["residual"]

    def error_message(self) -> str:
        if self.args:
            return f"Failed to parse the CREATE TABLE statement: {self.args}"
        return "Failed to parse the CREATE TABLE statement " \
               f"near {self.residual[:40]!r}."

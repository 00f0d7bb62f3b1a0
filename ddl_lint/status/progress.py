"""
進捗状況を表す列挙型とメッセージを定義

Functions
---------
- `get_progress_status_msg`: ProgressStatusに対応するメッセージを取得

Classes
-------
- `ProgressStatus`: 進捗状況

Constants
----------
- `MAX_STATUS_LENGTH`: 進捗状況の最大文字数
- `PROGRESS_STATUS_MSG`: 進捗状況メッセージ
"""
from enum import Enum, auto



#
# 進捗状況
#

class ProgressStatus(Enum):
    """進捗状況"""
    # 設定読み込み・事前準備
    INITIALIZING = 0
    # CREATE TABLE文の解析
    PARSING = auto()
    # リンタの実行
    LINTING = auto()
    # 終了処理
    TERMINATING = auto()
MAX_STATUS_LENGTH = max([len(s.name) for s in ProgressStatus])

# 進捗状況メッセージ
_cnt = len(ProgressStatus)
PROGRESS_STATUS_MSG = {
    ProgressStatus.INITIALIZING: f"Initializing... (STEP 1/{_cnt})",
    ProgressStatus.PARSING: f"Parsing the statement... (STEP 2/{_cnt})",
    ProgressStatus.LINTING: f"Running lint rules... (STEP 3/{_cnt})",
    ProgressStatus.TERMINATING: f"Terminating... (STEP 4/{_cnt})"
}


def get_progress_status_msg(status:ProgressStatus) -> str:
    """ProgressStatusに対応するメッセージを取得する

    Parameters
    ----------
    status : ProgressStatus
        進捗状況

    Returns
    -------
    str
        進捗状況メッセージ
    """
    return PROGRESS_STATUS_MSG[status]

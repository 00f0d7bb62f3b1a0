"""
ddl_lint.status パッケージ

DDLリンタの進捗状況・エラー・警告を表すクラスを提供する

Modules
-------
- `errors`: エラークラスを提供
- `progress`: 進捗状況を定義するクラス等を提供
- `warnings`: 警告クラスを提供
"""
from .progress import ProgressStatus, MAX_STATUS_LENGTH

"""
CREATE TABLE文を解析し、リンタを実行するモジュール

Classes
-------
- `DDLChecker`: CREATE TABLE文を解析し、リンタを実行するクラス
- `DDLCheckerConfig`: DDLリンタの設定クラス
- `LogLevel`: ログレベルを表すEnum

Functions
---------
- `load_config`: アプリケーションのディレクトリにある設定ファイル (ddl_lint.toml) を読み込む
- `parse_toml`: TOMLファイルから設定を読み込む
- `parse_toml_data`: TOML文字列から設定を読み込む

Usage
-----

```python
from ddl_lint.checker import DDLChecker, load_config

with DDLChecker(load_config()) as checker:
    err = checker.run("CREATE TABLE events (happened_on Date)")
    if err is None:
        print(checker.report.render(), end="")
```
"""
from .checker import DDLChecker
from .checker_config import (
    DDLCheckerConfig, LogLevel,
    load_config, parse_toml, parse_toml_data
)

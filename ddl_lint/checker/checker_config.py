"""
DDLリンタの設定を管理するモジュール

設定ファイル (TOML) は以下の構成を持つ。いずれのセクション・キーも省略可能で、
省略した場合はデフォルト値を使用する。

```toml
[linter]
min_table_name_length = 5       # テーブル名の最小長 (バイト数)
disabled_rules = []             # 無効にするルール名 (e.g. "short_table_name")

[logging]
log_path = ""                   # ログファイルのパス ("" の場合はログを出力しない)
log_encoding = "utf-8"
log_init = "NEVER"              # "NEVER" | "ALWAYS_ON_STARTUP"
log_level = "INFO"              # "INFO" | "WARNING" | "ERROR"
log_to_console = false          # 標準エラー出力にもログを出力するか

[debugging]
catch_errors_on_run = true      # .run() 実行時に想定外のエラーをcatchするか
```

Classes
-------
- `DDLCheckerConfig`: DDLリンタの設定を管理するクラス

Functions
---------
- `parse_toml`: TOMLファイルから設定を読み込む
- `parse_toml_data`: TOML文字列から設定を読み込む
- `load_config`: アプリケーションのディレクトリにある設定ファイルを読み込む

Enums
-----
- `LogLevel`: ログレベル
"""
from enum import Enum
from os import path
from typing import Any, Final, Optional

import tomlkit as toml
import tomlkit.items as toml_items

from ddl_lint.linter import MIN_LENGTH, DEFAULT_RULES



# ログレベル
class LogLevel(Enum):
    """
    ログレベル
    """
    INFO = 1
    WARNING = 2
    ERROR = 3
MAX_LOG_LEVEL_LENGTH = max([len(s.name) for s in LogLevel])

CONFIG_FILE_NAME: Final = "ddl_lint.toml"
"""`load_config` が読み込む設定ファイル名"""

DEFAULT_LOG_FILE_NAME: Final = "ddl_lint.log"
"""ログファイル名 (指定されたパスが不正な場合に使用)"""

_LOG_INIT_OPTIONS: Final = ("NEVER", "ALWAYS_ON_STARTUP")
"""log_init に指定可能な値"""


class DDLCheckerConfig:
    """
    DDLリンタの設定を管理するクラス
    """

    def __init__(self, app_dir:Optional[str]=None):
        """
        Parameters
        ----------
        app_dir : Optional[str], default None
            アプリケーションのディレクトリ、Noneの場合はカレントディレクトリ
            ログファイルのデフォルトの出力先として使用する
        """
        app_dir = path.abspath(app_dir or ".")

        self.min_table_name_length: int = MIN_LENGTH
        """テーブル名の最小長 (バイト数)"""
        self.disabled_rules: list[str] = []
        """無効にするルール名"""

        self.log_path: str = ""
        """ログファイルのパス、空文字列の場合はログを出力しない"""
        self.default_log_path: str = path.join(app_dir, DEFAULT_LOG_FILE_NAME)
        """ログファイルのパス (エラー用; 上記のパスが不正な場合に使用)"""
        self.log_encoding: str = "utf-8"
        """ログファイルのエンコーディング方式"""
        self.log_init: str = "NEVER"
        """
        ログの初期化をいつ行うか
        - "NEVER": 初期化しない
        - "ALWAYS_ON_STARTUP": 常に起動時に初期化
        """
        self.log_level: LogLevel = LogLevel.INFO
        """出力するログの最低レベル"""
        self.logging_to_console: bool = False
        """ログ出力を標準エラー出力にも行うか"""

        self.catch_errors_on_run: bool = True
        """.run() メソッド実行時にエラーをcatchするか (False: デバッグ用)"""
        self.app_dir: str = app_dir
        """アプリケーションのディレクトリ"""


#
# 読み込み
#

def load_config(app_dir:Optional[str]=None) -> DDLCheckerConfig:
    """アプリケーションのディレクトリにある設定ファイルを読み込む

    Parameters
    ----------
    app_dir : Optional[str], default None
        アプリケーションのディレクトリ、Noneの場合はカレントディレクトリ

    Returns
    -------
    DDLCheckerConfig
        設定、設定ファイルが存在しない場合はデフォルトの設定

    Raises
    ------
    ValueError
        設定ファイルの内容が不正な場合
    """
    app_dir = path.abspath(app_dir or ".")
    config_file = path.join(app_dir, CONFIG_FILE_NAME)
    if not path.isfile(config_file):
        return DDLCheckerConfig(app_dir)
    return parse_toml(config_file, app_dir)

def parse_toml(file_path:str, app_dir:Optional[str]=None) -> DDLCheckerConfig:
    """TOMLファイルから設定を読み込む

    Parameters
    ----------
    file_path : str
        TOMLファイルのパス
    app_dir : Optional[str], default None
        アプリケーションのディレクトリ、Noneの場合はTOMLファイルのあるディレクトリ

    Returns
    -------
    DDLCheckerConfig
        設定
    """
    with open(file_path, 'r', encoding="utf-8") as f:
        data = f.read()

    return parse_toml_data(data, app_dir or path.dirname(path.abspath(file_path)))

def parse_toml_data(data:str, app_dir:Optional[str]=None) -> DDLCheckerConfig:
    """TOML文字列から設定を読み込む

    Parameters
    ----------
    data : str
        TOMLデータ
    app_dir : Optional[str], default None
        アプリケーションのディレクトリ、Noneの場合はカレントディレクトリ

    Returns
    -------
    DDLCheckerConfig
        設定

    Raises
    ------
    ValueError
        設定の内容が不正な場合
    tomlkit.exceptions.ParseError
        TOMLとして解釈できない場合
    """
    toml_data = toml.loads(data)
    config = DDLCheckerConfig(app_dir)

    linter_section = _get_section(toml_data, "linter")
    config.min_table_name_length = _get_value(
        linter_section, "linter", "min_table_name_length", int, config.min_table_name_length
    )
    if config.min_table_name_length < 1:
        raise ValueError("Minimum table name length ('linter' > 'min_table_name_length') " \
                         "must be a positive integer")
    config.disabled_rules = _parse_disabled_rules(
        _get_value(linter_section, "linter", "disabled_rules", list, [])
    )

    logging_section = _get_section(toml_data, "logging")
    config.log_path = _get_value(logging_section, "logging", "log_path", str, config.log_path)
    if config.log_path:
        config.log_path = config.log_path.replace("{BASE_DIR}", config.app_dir)
    config.log_encoding = _get_value(logging_section, "logging", "log_encoding", str,
                                     config.log_encoding)
    config.log_init = _get_value(logging_section, "logging", "log_init", str,
                                 config.log_init).upper()
    if config.log_init not in _LOG_INIT_OPTIONS:
        raise ValueError(f"Log initialization '{config.log_init}' not supported: " \
                         f"choose from {', '.join(_LOG_INIT_OPTIONS)}")
    level = _get_value(logging_section, "logging", "log_level", str,
                       config.log_level.name).upper()
    if level not in LogLevel.__members__:
        raise ValueError(f"Log level '{level}' not supported: " \
                         f"choose from {', '.join(LogLevel.__members__)}")
    config.log_level = LogLevel[level]
    config.logging_to_console = _get_value(logging_section, "logging", "log_to_console", bool,
                                           config.logging_to_console)

    debugging_section = _get_section(toml_data, "debugging")
    config.catch_errors_on_run = _get_value(debugging_section, "debugging",
                                            "catch_errors_on_run", bool,
                                            config.catch_errors_on_run)

    return config

def _get_section(toml_data:toml.TOMLDocument, name:str) -> dict[str, Any]:
    """セクションを辞書として取得する (存在しない場合は空の辞書)

    Raises
    ------
    ValueError
        セクションがテーブルでない場合
    """
    section = toml_data.get(name)
    if section is None:
        return {}
    if not isinstance(section, (toml_items.Table, toml_items.InlineTable)):
        raise ValueError(f"Section '{name}' is not a table")
    return section.unwrap()

def _get_value(section:dict[str, Any], section_name:str, key:str,
               expected_type:type, default:Any) -> Any:
    """セクションから値を取得する (存在しない場合はデフォルト値)

    Raises
    ------
    ValueError
        値の型が `expected_type` でない場合
    """
    if (value := section.get(key)) is None:
        return default

    # bool は int のサブクラスなので区別する
    if (not isinstance(value, expected_type)
        or (expected_type is int and isinstance(value, bool))):
        raise ValueError(f"'{section_name}' > '{key}' must be of type " \
                         f"{expected_type.__name__}, not {type(value).__name__}")
    return value

def _parse_disabled_rules(names:list) -> list[str]:
    """無効にするルール名のリストを検証する

    Raises
    ------
    ValueError
        ルール名が文字列でない場合、または存在しないルール名が含まれる場合
    """
    known = [rule.name for rule in DEFAULT_RULES]
    for i, name in enumerate(names):
        if not isinstance(name, str):
            raise ValueError(f"The {i}-th rule name in 'linter' > 'disabled_rules' " \
                             "is not a string")
        if name not in known:
            raise ValueError(f"Lint rule '{name}' not found: " \
                             f"choose from {', '.join(known)}")
    return list(names)

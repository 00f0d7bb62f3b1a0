"""
アプリケーションのエントリーポイント
"""
import os
import sys

from ddl_lint.checker import DDLChecker, load_config



# リンタにかけるCREATE TABLE文
SQL = "CREATE TABLE table (my_date Date, my_string String)"


def main(sql:str=SQL) -> int:
    """
    アプリケーションのエントリーポイント

    Parameters
    ----------
    sql : str, default SQL
        CREATE TABLE文

    Returns
    -------
    int
        終了コード (解析に失敗した場合は1)
    """
    # カレントディレクトリに ddl_lint.toml があれば読み込む
    try:
        config = load_config(os.getcwd())
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    with DDLChecker(config) as checker:
        if (err := checker.run(sql)) is not None:
            print(err.error_message(), file=sys.stderr)
            return 1

        print(checker.report.render(), end="")
    return 0



if __name__ == "__main__":
    sys.exit(main())

"""
ddl_lint パッケージ

CREATE TABLE文を解析し、テーブル定義に対してリンタを実行する

Packages
--------
- `schema_toolkit`: CREATE TABLE文の解析
- `linter`: リンタのルールと実行
- `checker`: 設定・ログ出力を含めた解析・リンタの実行
- `status`: 進捗状況・エラー・警告
"""

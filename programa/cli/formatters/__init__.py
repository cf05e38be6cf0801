"""CLI出力フォーマッタパッケージ"""

"""CLIユーティリティパッケージ"""

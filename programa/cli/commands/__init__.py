"""CLIコマンドパッケージ"""

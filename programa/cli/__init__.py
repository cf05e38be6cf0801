"""Click CLIメインモジュール"""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """Race program parsing CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# コマンドの登録
from programa.cli.commands.parse import parse_command, preview_command

main.add_command(parse_command)
main.add_command(preview_command)


__all__ = ["main"]

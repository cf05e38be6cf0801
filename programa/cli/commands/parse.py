"""パースコマンド

抽出済みテキストファイルを解析し、要約・JSON・プレビューを出力するCLIコマンドを提供する。
"""

import json
from pathlib import Path

import click

from programa.cli.formatters.preview import format_preview, format_summary
from programa.config.formats import FORMAT_HINT_ALIASES
from programa.parsers import DocumentParser

FORMAT_CHOICES = click.Choice(sorted(FORMAT_HINT_ALIASES), case_sensitive=False)


def _read_document(path: str) -> str:
    # 上流の抽出結果が不正なUTF-8を含んでも失敗させない
    return Path(path).read_text(encoding="utf-8", errors="replace")


@click.command("parse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "format_hint", default="auto", type=FORMAT_CHOICES, help="Source format")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the full document as JSON")
def parse_command(path: str, format_hint: str, as_json: bool):
    """Parse an extracted program text file"""
    document = DocumentParser().parse(_read_document(path), format_hint)

    if as_json:
        click.echo(json.dumps(document.to_dict(), ensure_ascii=False, indent=2))
        return

    click.echo(format_summary(document))


@click.command("preview")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "format_hint", default="auto", type=FORMAT_CHOICES, help="Source format")
def preview_command(path: str, format_hint: str):
    """Show the parsed entries for human review"""
    document = DocumentParser().parse(_read_document(path), format_hint)
    click.echo(format_preview(document))

"""プレビュー出力フォーマッタ

取り込み前の人手確認用に、ParsedDocument を読みやすいテキストに整形する。
ソースフォーマットのレイアウトを知らなくても読めることを目的とする。
"""

from programa.cli.utils.table_formatter import format_table
from programa.models import Entry, ParsedDocument, ParsedRace

ENTRY_HEADERS = ("No", "Horse", "Weight", "Jockey", "Trainer", "PP")


def _format_weight(entry: Entry) -> str:
    # 減量がある場合は元の表記と解決後の値を併記する
    resolved = f"{entry.weight:g}"
    if entry.weight_raw == resolved:
        return resolved
    return f"{entry.weight_raw} ({resolved})"


def format_meeting_line(document: ParsedDocument) -> str:
    meeting = document.meeting
    date_text = meeting.date.date().isoformat() if meeting.date else "unknown date"
    day = f" {meeting.day_of_week}" if meeting.day_of_week else ""
    return (
        f"{meeting.track.name} - Meeting {meeting.meeting_number} - "
        f"{date_text}{day} [{document.source_format.value}]"
    )


def format_race_heading(parsed: ParsedRace) -> str:
    race = parsed.race
    parts = [f"Race {race.race_number}"]
    if race.distance:
        parts.append(f"{race.distance} m")
    if race.scheduled_time:
        parts.append(race.scheduled_time)
    parts.append(f"{len(parsed.entries)} entries")
    return " | ".join(parts)


def format_summary(document: ParsedDocument) -> str:
    """要約（開催情報・レース数・出走数・警告）を整形"""
    lines = [
        format_meeting_line(document),
        f"Races: {len(document.races)}",
        f"Entries: {document.entry_count}",
        f"Fingerprint: {document.raw_text_fingerprint}",
    ]
    for parsed in document.races:
        lines.append(f"  {format_race_heading(parsed)}")
    lines.extend(format_warnings(document))
    return "\n".join(lines)


def format_warnings(document: ParsedDocument) -> list[str]:
    if not document.warnings:
        return ["Warnings: none"]
    lines = [f"Warnings: {len(document.warnings)}"]
    lines.extend(f"  - {warning}" for warning in document.warnings)
    return lines


def format_preview(document: ParsedDocument) -> str:
    """レースごとの出走表テーブルを整形"""
    lines = [format_meeting_line(document), ""]

    for parsed in document.races:
        lines.append(format_race_heading(parsed))
        if parsed.race.conditions:
            lines.append(parsed.race.conditions)
        rows = [
            (
                str(entry.dorsal_number),
                entry.horse.name,
                _format_weight(entry),
                entry.jockey.name,
                entry.trainer.name,
                str(entry.post_position),
            )
            for entry in parsed.entries
        ]
        lines.append(format_table(ENTRY_HEADERS, rows, right_aligned=(0, 2, 5)))
        lines.append("")

    lines.extend(format_warnings(document))
    return "\n".join(lines)

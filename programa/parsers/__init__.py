"""Parser modules for race program documents."""

from programa.parsers.base import FormatStrategy
from programa.parsers.block_segmenter import split_blocks
from programa.parsers.document_parser import DocumentParser, detect_format, parse
from programa.parsers.entry_table import (
    ColumnEntryExtractor,
    EntryTableExtractor,
    VerticalEntryExtractor,
)
from programa.parsers.format_a import FormatAStrategy
from programa.parsers.format_b import FormatBStrategy
from programa.parsers.line_reassembler import reassemble_lines, reassemble_text

__all__ = [
    "ColumnEntryExtractor",
    "DocumentParser",
    "EntryTableExtractor",
    "FormatAStrategy",
    "FormatBStrategy",
    "FormatStrategy",
    "VerticalEntryExtractor",
    "detect_format",
    "parse",
    "reassemble_lines",
    "reassemble_text",
    "split_blocks",
]

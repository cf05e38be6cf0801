"""Race program document parsing and normalization."""

from programa.merge import IngestResult, MergeLayer
from programa.models import ParsedDocument, SourceFormat
from programa.parsers.document_parser import DocumentParser, detect_format, parse

__all__ = [
    "DocumentParser",
    "IngestResult",
    "MergeLayer",
    "ParsedDocument",
    "SourceFormat",
    "detect_format",
    "parse",
]

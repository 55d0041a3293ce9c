import logging
from pathlib import Path
from typing import Callable, Dict, List, NamedTuple, Optional, Union

from .errors import EmptyResultError, UnsupportedFormatError
from .parsers import parse_alc, parse_ivdc, parse_mcafee, parse_passage, parse_tsmc
from .split import split_alc, split_csv_rows, split_lines, split_tsmc
from .types import FileType, ParsedData


logger = logging.getLogger(__name__)


class FormatPipeline(NamedTuple):
    split: Callable[[str], List[str]]
    extract: Callable[[str], Optional[object]]
    collection: str  # ParsedData field the records land in


PIPELINES: Dict[FileType, FormatPipeline] = {
    FileType.TSMC: FormatPipeline(split_tsmc, parse_tsmc, "logs"),
    FileType.ALC: FormatPipeline(split_alc, parse_alc, "logs"),
    FileType.MCAFEE: FormatPipeline(split_lines, parse_mcafee, "logs"),
    FileType.PASSAGE: FormatPipeline(split_csv_rows, parse_passage, "passage"),
    FileType.IVDC: FormatPipeline(split_csv_rows, parse_ivdc, "ivdc"),
}


def supported_formats() -> List[str]:
    return [fmt.value for fmt in PIPELINES]


def resolve_format(format_tag: Union[FileType, str]) -> FileType:
    try:
        return FileType(format_tag)
    except ValueError:
        raise UnsupportedFormatError(format_tag) from None


def decode_content(content: Union[str, bytes]) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8-sig", errors="replace")
    return content.lstrip("\ufeff")


def parse_file(format_tag: Union[FileType, str], content: Union[str, bytes]) -> ParsedData:
    """
    Parse one whole export into a ParsedData aggregate.

    Pipeline:
      raw content
        → format lookup
          → record splitter
            → per-chunk field extractor (malformed chunks dropped)
              → ParsedData

    Raises UnsupportedFormatError for an unknown tag and EmptyResultError
    when nothing at all could be parsed.
    """
    fmt = resolve_format(format_tag)
    pipeline = PIPELINES[fmt]

    chunks = pipeline.split(decode_content(content))
    records = []
    for chunk in chunks:
        record = pipeline.extract(chunk)
        if record is not None:
            records.append(record)

    logger.info(
        "Parsed %d %s records (%d skipped)",
        len(records),
        fmt.value,
        len(chunks) - len(records),
    )

    data = ParsedData(**{pipeline.collection: tuple(records)})
    if data.is_empty():
        raise EmptyResultError(fmt.value)

    return data


def parse_path(format_tag: Union[FileType, str], path: Union[str, Path]) -> ParsedData:
    """Read a file once and parse it."""
    fmt = resolve_format(format_tag)
    return parse_file(fmt, Path(path).read_bytes())

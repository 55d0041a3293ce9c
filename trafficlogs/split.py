from typing import List


# Record markers for the two controller exports. Neither one puts a
# record on its own line.
TSMC_RECORD_MARKER = ":)"
ALC_RECORD_MARKER = "~|["

HEADER_MARKER = "timestamp"


def split_on_marker(content: str, marker: str) -> List[str]:
    """
    Split a marker-delimited export into candidate records.

    Whitespace-only chunks (including the tail after the final marker)
    are dropped.
    """
    return [
        chunk
        for chunk in content.strip().split(marker)
        if chunk.strip()
    ]


def split_tsmc(content: str) -> List[str]:
    return split_on_marker(content, TSMC_RECORD_MARKER)


def split_alc(content: str) -> List[str]:
    return split_on_marker(content, ALC_RECORD_MARKER)


def split_lines(content: str) -> List[str]:
    return [line for line in content.strip().splitlines() if line.strip()]


def is_header_row(line: str) -> bool:
    first_cell = line.split(",", 1)[0]
    return HEADER_MARKER in first_cell.lower()


def split_csv_rows(content: str) -> List[str]:
    """
    Split CSV content into stripped, non-blank data rows.

    A header row is only recognized on the first line.
    """
    rows = [line.strip() for line in split_lines(content)]
    if rows and is_header_row(rows[0]):
        rows = rows[1:]
    return rows

from trafficlogs.split import (
    is_header_row,
    split_alc,
    split_csv_rows,
    split_lines,
    split_on_marker,
    split_tsmc,
)


def test_marker_split_drops_blank_chunks():
    assert split_on_marker("  a:) :)\n b :)\n\n", ":)") == ["a", "\n b "]


def test_tsmc_split_on_smiley_marker():
    content = "rec1/a:)\nrec2/b:)\n"
    assert split_tsmc(content) == ["rec1/a", "\nrec2/b"]


def test_alc_split_drops_leading_empty_chunk():
    content = "~|[one\tx]|~\n~|[two\ty]|~\n"
    assert split_alc(content) == ["one\tx]|~\n", "two\ty]|~"]


def test_split_lines_handles_crlf():
    assert split_lines("a\r\nb\r\n\r\nc") == ["a", "b", "c"]


def test_header_detection_uses_first_cell_only():
    assert is_header_row("Timestamp,Lane,Class,Revenue")
    assert is_header_row("event_timestamp_utc,lane")
    assert not is_header_row("2024-01-15T10:00:00,3,Car,timestamp")


def test_csv_rows_skip_header():
    content = "timestamp,lane\n 2024-01-15,3 \n\n2024-01-16,4\n"
    assert split_csv_rows(content) == ["2024-01-15,3", "2024-01-16,4"]


def test_csv_rows_without_header_keep_first_row():
    assert split_csv_rows("2024-01-15,3\n") == ["2024-01-15,3"]


def test_csv_header_only_on_first_line():
    content = "2024-01-15,3\ntimestamp,lane\n"
    assert split_csv_rows(content) == ["2024-01-15,3", "timestamp,lane"]


def test_empty_content_has_no_chunks():
    assert split_tsmc("") == []
    assert split_alc("   \n") == []
    assert split_csv_rows("") == []

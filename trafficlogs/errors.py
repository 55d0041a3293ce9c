class ParseError(ValueError):
    """Base for call-level parse failures."""


class UnsupportedFormatError(ParseError):
    def __init__(self, format_tag):
        super().__init__(f"Unsupported file type: {format_tag}")
        self.format_tag = format_tag


EMPTY_RESULT_MESSAGE = (
    "File content could not be parsed or the file is empty. "
    "Please check the file format and selected data source type."
)


class EmptyResultError(ParseError):
    def __init__(self, format_tag):
        super().__init__(EMPTY_RESULT_MESSAGE)
        self.format_tag = format_tag

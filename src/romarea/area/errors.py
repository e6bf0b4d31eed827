"""Exceptions raised while parsing an area file.

The first error aborts the whole parse; there is no partial result.
"""


class ParseError(Exception):
    """Base class for every area-file parse failure."""

    message = "Area file parse error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        # 1-based line number, filled in by the dispatcher when known
        self.line: int | None = None

    def __str__(self) -> str:
        text = super().__str__()
        if self.line is not None:
            return f"{text} (line {self.line})"
        return text


class UnexpectedEof(ParseError):
    message = "Unexpected end of file"


class InvalidVnum(ParseError):
    message = "Invalid vnum format"


class InvalidDirection(ParseError):
    message = "Invalid direction code"


class InvalidSectorType(ParseError):
    message = "Invalid sector type"


class InvalidRoomAttributes(ParseError):
    message = "Invalid room attributes"


class InvalidExitData(ParseError):
    message = "Invalid exit data"


class InvalidObjectType(ParseError):
    message = "Invalid object type line"


class InvalidObjectWeightCost(ParseError):
    message = "Invalid object weight/cost/level/condition line"


class InvalidResetCommand(ParseError):
    message = "Invalid reset command"


class InvalidNumber(ParseError):
    """An integer token could not be converted."""

    def __init__(self, field: str, token: str):
        super().__init__(f"Parse integer error: {field} {token!r}")
        self.field = field
        self.token = token


class MissingField(ParseError):
    def __init__(self, name: str):
        super().__init__(f"Missing required field: {name}")
        self.name = name

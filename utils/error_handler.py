"""Custom exception classes for the application."""

class BaseGraderException(Exception):
    """Base exception for all application-specific errors."""
    pass

class ConfigError(BaseGraderException):
    """Error related to configuration loading or values (e.g. an invalid grading scheme)."""
    pass

class ParseError(BaseGraderException):
    """Error turning a raw roster line into fields or a record."""
    pass

class EmptyName(ParseError):
    """The first field of a roster line is empty."""
    def __init__(self, message: str = "Parsed name is empty"):
        super().__init__(message)

class InvalidScore(ParseError):
    """A score field is not an integer or lies outside the allowed range."""
    def __init__(self, value: int | str, minimum: int, maximum: int):
        super().__init__(
            f"Parsed score '{value}' is not within score range of '{minimum}' to '{maximum}'"
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum

class GradeError(BaseGraderException):
    """Error while deriving a letter grade."""
    pass

class ScoreCountMismatch(GradeError):
    """A record does not carry one score per graded component."""
    def __init__(self, name: str, actual: int, required: int):
        super().__init__(
            f"Student {name} has {actual} scores, {required} scores are required to calculate the grade"
        )
        self.name = name
        self.actual = actual
        self.required = required

class RosterError(BaseGraderException):
    """Error operating on the roster of student records."""
    pass

class NullRecord(RosterError):
    """No record was supplied to a roster operation."""
    def __init__(self, message: str = "Student record for roster operation is empty"):
        super().__init__(message)

class EmptyRoster(RosterError):
    """Statistics were requested from a roster holding no records."""
    def __init__(self, message: str = "Divide by zero attempted: roster has no records"):
        super().__init__(message)

class RosterFileError(BaseGraderException):
    """Error reading the roster file or writing the grade report."""
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        if self.path:
            return f"{base} (File: {self.path})"
        return base

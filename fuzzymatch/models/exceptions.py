"""Exception hierarchy for fuzzymatch.

Matching itself never raises: a missing character is a score of 0.0,
not an error. These exceptions cover configuration and the opt-in
input-size guard.
"""


class FuzzyMatchError(Exception):
    """Base exception for all fuzzymatch errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ConfigError(FuzzyMatchError):
    """Configuration is invalid or missing."""

    pass


class ConfigValidationError(ConfigError):
    """Configuration value failed validation."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid value for {field}: {value!r}",
            suggestion=reason,
        )


class InputTooLargeError(FuzzyMatchError):
    """Input exceeds the configured max_input_length guard."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input of length {length} exceeds limit of {limit}",
            suggestion="shorten the input or raise max_input_length",
        )

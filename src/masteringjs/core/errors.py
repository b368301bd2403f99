"""Error types for site rendering."""


class InvalidInputError(ValueError):
    """Raised when a record or content source is missing a required field."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Invalid or missing field: {field}")

"""Exception types raised by the fuel economy catalog."""

from typing import Optional

from .vehicle import BASE_TRIM_LABEL


class CatalogError(Exception):
    """Base class for all catalog errors."""


class DecodeError(CatalogError):
    """Raw vehicle data could not be turned into a catalog."""


class MissingField(DecodeError):
    """A required field is absent or has the wrong type."""

    def __init__(self, field: str, record_index: int):
        self.field = field
        self.record_index = record_index
        super().__init__(f"Record {record_index}: missing or invalid field '{field}'")


class SourceUnavailable(DecodeError):
    """The data source could not be read at all."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Data source unavailable: {source}")


class MalformedInput(DecodeError):
    """The data is readable but not shaped like a list of vehicle records."""

    def __init__(self, message: str, record_index: Optional[int] = None):
        self.record_index = record_index
        if record_index is not None:
            message = f"Record {record_index}: {message}"
        super().__init__(message)


class EmptyAggregateError(CatalogError):
    """Statistics were requested over zero vehicles."""

    def __init__(self):
        super().__init__("Cannot aggregate an empty vehicle group")


class NotFound(CatalogError):
    """The requested year/model/trim path does not exist in the catalog."""

    def __init__(
        self, year: int, model: Optional[str] = None, trim: Optional[str] = None
    ):
        self.year = year
        self.model = model
        self.trim = trim
        super().__init__(f"Not found: {self.path}")

    @property
    def path(self) -> str:
        """Human-readable navigation path, e.g. '2024 / Prius / Base Trim'."""
        parts = [str(self.year)]
        if self.model is not None:
            parts.append(self.model)
        if self.trim is not None:
            parts.append(self.trim or BASE_TRIM_LABEL)
        return " / ".join(parts)

"""Exception hierarchy for Scopefig."""


class ScopefigError(Exception):
    """Base exception for all Scopefig errors."""

    pass


class ConfigurationError(ScopefigError):
    """Invalid parameter or degenerate view box."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GeometryError(ScopefigError):
    """Errors raised while turning geometry into waypoints."""

    pass


class UnsupportedGeometryError(GeometryError):
    """A curved or unknown path event reached the waypoint accumulator."""

    def __init__(self, event: object) -> None:
        self.event = event
        super().__init__(
            f"Unsupported path event {type(event).__name__}: "
            "curves must be flattened before accumulation"
        )


class EmptyGeometryError(GeometryError):
    """The document produced no waypoints."""

    def __init__(self, message: str = "Document contains no drawable geometry") -> None:
        super().__init__(message)


class DegenerateGeometryError(GeometryError):
    """All waypoints coincide, so no scale can be derived."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DocumentError(ScopefigError):
    """Errors related to reading documents or writing audio."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading a vector graphics document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class AudioWriteError(DocumentError):
    """Error writing the audio file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write audio '{path}': {reason}")

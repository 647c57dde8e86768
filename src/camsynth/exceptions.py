"""Exception hierarchy for camsynth."""


class CamSynthError(Exception):
    """Base exception for all camsynth errors."""

    pass


class InputError(CamSynthError):
    """Errors related to reading the source document."""

    pass


class SourceReadError(InputError):
    """Error reading or parsing an SVG source document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")


class PathSyntaxError(InputError):
    """Malformed SVG path data."""

    def __init__(self, path_data: str, reason: str) -> None:
        self.path_data = path_data
        self.reason = reason
        super().__init__(f"Invalid path data '{path_data[:40]}': {reason}")


class OutputError(CamSynthError):
    """Errors related to writing output files."""

    pass


class OutputWriteError(OutputError):
    """Error creating or writing an output file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to create '{path}': {reason}")


class OutputPathError(OutputError):
    """Output file name that cannot be suffixed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid output file name '{path}': {reason}")


class GeometryError(CamSynthError):
    """Errors in curve construction."""

    pass


class UnsupportedGeometryError(GeometryError):
    """Segment shape that cannot be represented as a curve primitive."""

    def __init__(self, segment: object, reason: str) -> None:
        self.segment = segment
        self.reason = reason
        super().__init__(f"Unsupported segment {segment!r}: {reason}")


class EmptyCurveError(GeometryError):
    """Curve without any drawable segment."""

    def __init__(self, message: str = "Curve has no drawable segments") -> None:
        super().__init__(message)


class LinkageError(CamSynthError):
    """Errors related to linkage synthesis."""

    pass


class LinkageInfeasibleError(LinkageError):
    """Cam point outside the reachable range of the linkage."""

    def __init__(self, step: int, point: tuple[float, float], reason: str) -> None:
        self.step = step
        self.point = point
        self.reason = reason
        super().__init__(
            f"Linkage cannot reach ({point[0]:.3f}, {point[1]:.3f}) at step {step}: {reason}"
        )

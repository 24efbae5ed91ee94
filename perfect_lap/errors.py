"""Fatal analysis errors.

Each one means the input cannot yield a meaningful result; callers map
them to user-facing messages.
"""


class TelemetryAnalysisError(Exception):
    """Base class for errors that abort an analysis run."""
    pass


class WrongFileKindError(TelemetryAnalysisError):
    """Raised when the headers identify a non-telemetry file (e.g., race standings)."""
    pass


class EmptyOrInvalidDataError(TelemetryAnalysisError):
    """Raised when the leading rows carry no plausible numeric signal."""
    pass


class NoLapsDetectedError(TelemetryAnalysisError):
    """Raised when no lap survives the minimum sample count."""
    pass


class NoValidSectorsError(TelemetryAnalysisError):
    """Raised when every sector definition lacks a non-drafting instance."""
    pass

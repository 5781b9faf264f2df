"""
Exception types.

Every failure in the package is raised synchronously to the caller.
"""


class PlotRegError(Exception):
    """Base class for all pyregplot errors."""


class UnknownColumnError(PlotRegError, KeyError):
    """Requested column name is absent from the table."""

    def __init__(self, name, available=()):
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self):
        return (
            f"Unknown column: '{self.name}'\n"
            f"Available columns: {self.available}"
        )


class LengthMismatchError(PlotRegError, ValueError):
    """Paired sequences have unequal length."""


class EmptyInputError(PlotRegError, ValueError):
    """Zero-length data passed to a plotting primitive."""


class IncompleteSeriesError(PlotRegError, ValueError):
    """A metric series is shorter than the declared epoch count."""

    def __init__(self, metric_name, length, expected):
        self.metric_name = metric_name
        self.length = length
        self.expected = expected
        super().__init__(
            f"Metric '{metric_name}' has {length} values, "
            f"expected {expected} (one per epoch)"
        )


class PlotWriteError(PlotRegError, OSError):
    """Output directory or image file could not be created or written."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Cannot write plot to '{path}': {reason}")

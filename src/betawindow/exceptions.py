"""Error kinds raised by the moving-window routines.

Every fatal kind derives from ``ValueError`` so existing ``except ValueError``
handling around the analysis keeps working.
"""


class BetaWindowError(ValueError):
    """Base class for invalid input to the moving-window analysis."""


class DimensionMismatch(BetaWindowError):
    """The two matrices (or a single matrix's rows and columns) differ in size."""


class LabelMismatch(BetaWindowError):
    """Row/column labels differ, are duplicated, or are ordered differently."""


class InvalidPolicy(BetaWindowError):
    """Both or neither of ``k`` and ``radius`` were supplied."""


class InvalidParameter(BetaWindowError):
    """``k`` outside [1, n-1] or a negative radius."""


class InvalidMatrix(BetaWindowError):
    """Matrix values are negative, missing or infinite."""


class InvalidCoordinates(BetaWindowError):
    """Site coordinates are missing or outside the valid latitude/longitude range."""

"""
Calculation error taxonomy.

Calculators raise these internally. The default entry points turn every one
of them into a zero weight; the strict entry points let them propagate.
"""


class CalculationError(Exception):
    """Base class for anything that makes a weight undefined."""

    kind = "calculation_error"


class MissingInputError(CalculationError):
    """A required dimension is absent, zero or negative."""

    kind = "missing_input"


class InvalidGeometryError(CalculationError):
    """Dimensions are present but describe an impossible cross-section."""

    kind = "invalid_geometry"


class UnknownLookupError(CalculationError):
    """A profile designation or shape/subtype combination is not in a table."""

    kind = "unknown_lookup"

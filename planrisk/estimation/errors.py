"""Estimation input error type.

Raised by the caller-side validators, never by the estimators themselves.
"""


class EstimationInputError(ValueError):
    """Raised when an estimation input is missing, non-integer or non-positive.

    Attributes:
        field: Name of the offending input
        value: Value that was rejected
    """

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"{field}: {reason} (got {value!r})")

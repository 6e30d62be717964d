# core/errors.py


class InvalidTuningError(ValueError):
    """A tuning value (or wiring) violates its invariant.

    Raised by runtime setters; the previous value is left in place.
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field

class InvalidArgumentError(ValueError):
    """Raised when an argument is outside the domain an operation accepts.

    Subclasses `ValueError`, so existing `except ValueError` handlers keep working.
    """

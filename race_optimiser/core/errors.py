"""Exception types for the race setup engine."""


class InvalidInputError(ValueError):
    """Raised when a car or track violates a precondition of the engine.

    Typical causes are a non-positive lap length or tank capacity, which
    would otherwise surface as a division by zero or an infinite result.
    """

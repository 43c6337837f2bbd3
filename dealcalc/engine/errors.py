"""Engine error taxonomy."""


class InvalidInputError(ValueError):
    """Inputs are malformed or out of domain. Surfaced to the caller as-is."""


class ContractViolationError(AssertionError):
    """The engine was called out of sequence, e.g. exit analysis on an empty series."""

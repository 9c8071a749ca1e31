class PriorityError(Exception):
    """Base class for every error raised by task_priority."""


class UnknownPriorityLabel(PriorityError, ValueError):
    """
    Raised when a label does not name any Priority.

    Subclasses ValueError so pydantic reports it as a validation error
    when it happens inside a field validator.
    """

    def __init__(self, label):
        self.label = label
        super().__init__(f"Unknown priority label: {label!r}")


class ConfigurationError(PriorityError):
    """Raised when a configuration source cannot be loaded."""

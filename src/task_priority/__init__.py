"""
Abstract priorities for tasks or threads.

task_priority only defines a type used to coordinate behaviors between
parts of a program, for example a 'background' priority or a 'user
interactive' priority. It does not schedule anything.

Usage:
    from task_priority import Priority

    if priority >= Priority.UTILITY:
        ...
"""
from task_priority.core.exception import ConfigurationError, PriorityError, UnknownPriorityLabel
from task_priority.core.priorities import Priority

__version__ = "1.0.0"
__all__ = [
    "ConfigurationError",
    "Priority",
    "PriorityError",
    "UnknownPriorityLabel",
]

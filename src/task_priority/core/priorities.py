import functools
from enum import Enum
from typing import Union

from task_priority.core.exception import UnknownPriorityLabel
from task_priority.utils.string_parsing import normalize_label


@functools.total_ordering
class Priority(Enum):
    """
    Abstract priority for tasks or threads.

    Priority does not do anything by itself: it is the shared vocabulary
    that lets unrelated parts of a program agree on how urgent a piece of
    work is. Mapping a priority onto threads, queues or OS scheduling
    classes is up to the consumer.

    Members are ordered by urgency, more urgent comparing greater:

        USER_INTERACTIVE > USER_INITIATED > UTILITY > BACKGROUND > UNKNOWN

    so ``priority >= Priority.UTILITY`` reads "at least as urgent as
    utility work". Equality is identity of the member; a Priority never
    equals an int, a string or a member of another enum.

    The set of members may grow in a future major version. Code that
    branches on every member should keep a fallback branch.

    Example:
        >>> Priority.UTILITY > Priority.BACKGROUND
        True
        >>> str(Priority.highest_async())
        'UserInitiated'
    """
    # The task runs at UI priority: paint the screen or respond to input
    # as soon as possible. With a single-threaded UI it runs on the UI
    # thread and may block it.
    USER_INTERACTIVE = 4
    # The user is waiting on the result and expects it before switching
    # focus, on the order of a second.
    USER_INITIATED = 3
    # The user may switch focus before completion (10+ seconds). Work
    # that would typically show a progress bar.
    UTILITY = 2
    # Not time-sensitive, not visible to the user, needs no user input.
    BACKGROUND = 1
    # The priority could not be determined. Avoid producing it.
    UNKNOWN = 0

    def __lt__(self, other):
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        return self.label

    @property
    def label(self) -> str:
        """Human-readable name, for logs and diagnostics only."""
        return _LABELS[self]

    @property
    def is_known(self) -> bool:
        return self is not Priority.UNKNOWN

    @classmethod
    def highest_async(cls) -> "Priority":
        """
        Return the highest priority suitable for general, blocking, async work.

        This is USER_INITIATED rather than USER_INTERACTIVE: interactive
        priority is kept for input and paint paths, which must not compete
        with generic async work.
        """
        return cls.USER_INITIATED

    @classmethod
    def unit_test(cls) -> "Priority":
        """A priority suitable for unit testing."""
        return cls.USER_INITIATED

    @classmethod
    def core(cls) -> tuple["Priority", ...]:
        """Return the known priorities, most urgent first."""
        return (
            cls.USER_INTERACTIVE,
            cls.USER_INITIATED,
            cls.UTILITY,
            cls.BACKGROUND,
        )

    @classmethod
    def from_label(cls, value: Union["Priority", str]) -> "Priority":
        """
        Resolve a member name or label to a Priority.

        Matching ignores case, surrounding whitespace and ``_``/``-``
        separators, so "USER_INITIATED", "UserInitiated" and
        "user-initiated" all resolve to USER_INITIATED. Meant for
        configuration input; it is not a serialization format.

        Args:
            value: A Priority, returned unchanged, or a label

        Returns:
            Priority: The matching member

        Raises:
            UnknownPriorityLabel: If value names no member
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownPriorityLabel(value)

        normalized = normalize_label(value)
        if normalized in _BY_LABEL:
            return _BY_LABEL[normalized]
        if normalized in _UNKNOWN_SPELLINGS:
            return cls.UNKNOWN
        raise UnknownPriorityLabel(value)


_LABELS: dict[Priority, str] = {
    Priority.USER_INTERACTIVE: "UserInteractive",
    Priority.USER_INITIATED: "UserInitiated",
    Priority.UTILITY: "Utility",
    Priority.BACKGROUND: "Background",
    Priority.UNKNOWN: "Unknown",
}

_BY_LABEL: dict[str, Priority] = {
    normalize_label(label): priority for priority, label in _LABELS.items()
}

# Spellings of "no priority" seen in config files
_UNKNOWN_SPELLINGS: frozenset[str] = frozenset({"none", "unset", "undetermined"})

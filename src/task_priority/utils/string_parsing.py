import re


_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_label(value: str) -> str:
    """
    Reduce a free-form priority label to a comparable key.

    Surrounding whitespace is stripped, case is folded and the
    separators ``_``, ``-`` and whitespace are dropped, so
    "user_initiated", "User-Initiated" and "UserInitiated" all
    normalize to "userinitiated".

    Args:
        value: Label to normalize

    Returns:
        str: Normalized label

    Raises:
        ValueError: If value is not a string
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected string, got {type(value).__name__}")
    return _SEPARATORS.sub("", value.strip().casefold())

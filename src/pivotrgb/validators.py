"""Argument validation decorators for pipeline and color-edit methods.

Each decorator looks up the validated argument by keyword first and then by
position (``param_index``, default 1 so that ``self`` is skipped). When the
argument is absent the wrapped function is called unchanged.

Example:
    >>> class Tint:
    ...     @validate_range(0.0, 1.0, "change")
    ...     def lighten(self, change: float) -> "Tint":
    ...         ...
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Collection
from numbers import Real
from typing import Any

_MISSING = object()

# Hints appended to error messages for well-known parameter names
_RANGE_SUGGESTIONS = {
    "change": "Use 0.0 to leave the color unchanged and 1.0 for the full effect.",
    "fraction": "Use 1.0 to keep the color as-is and 0.0 to reduce it to neutral gray.",
    "factor": "Use 1.0 for no change around the 0.5 neutral point.",
    "variance": "Use small values such as 0.05 for subtle variation.",
}

_POSITIVE_SUGGESTIONS = {
    "factor": "Use 1.0 for no change around the 0.5 neutral point.",
}


def _get_argument(args: tuple, kwargs: dict, name: str, param_index: int) -> Any:
    if name in kwargs:
        return kwargs[name]
    if len(args) > param_index:
        return args[param_index]
    return _MISSING


def _require_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


def validate_range(
    min_value: float, max_value: float, name: str, param_index: int = 1
) -> Callable:
    """Validate that a numeric argument lies in ``[min_value, max_value]``.

    :param min_value: Inclusive lower bound
    :param max_value: Inclusive upper bound
    :param name: Argument name (keyword lookup and error messages)
    :param param_index: Positional index of the argument
    :raises ValueError: If the value is outside the range
    :raises TypeError: If the value is not a number
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            value = _get_argument(args, kwargs, name, param_index)
            if value is not _MISSING:
                number = _require_number(name, value)
                if not min_value <= number <= max_value:
                    message = (
                        f"{name}={value} is outside valid range [{min_value}, {max_value}]."
                    )
                    hint = _RANGE_SUGGESTIONS.get(name)
                    if hint:
                        message = f"{message} {hint}"
                    raise ValueError(message)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_positive(name: str, param_index: int = 1) -> Callable:
    """Validate that a numeric argument is strictly positive.

    :param name: Argument name (keyword lookup and error messages)
    :param param_index: Positional index of the argument
    :raises ValueError: If the value is zero or negative
    :raises TypeError: If the value is not a number
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            value = _get_argument(args, kwargs, name, param_index)
            if value is not _MISSING:
                number = _require_number(name, value)
                if number <= 0:
                    message = f"{name}={value} must be positive."
                    hint = _POSITIVE_SUGGESTIONS.get(name)
                    if hint:
                        message = f"{message} {hint}"
                    raise ValueError(message)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_type(expected: type | tuple[type, ...], name: str, param_index: int = 1) -> Callable:
    """Validate the type of an argument.

    :param expected: Type or tuple of accepted types
    :param name: Argument name (keyword lookup and error messages)
    :param param_index: Positional index of the argument
    :raises TypeError: If the value has the wrong type
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            value = _get_argument(args, kwargs, name, param_index)
            if value is not _MISSING and not isinstance(value, expected):
                if isinstance(expected, tuple):
                    names = ", ".join(t.__name__ for t in expected)
                    raise TypeError(
                        f"{name} must be one of ({names}), got {type(value).__name__}"
                    )
                raise TypeError(
                    f"{name} must be {expected.__name__}, got {type(value).__name__}"
                )
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_choices(choices: Collection[str], name: str, param_index: int = 1) -> Callable:
    """Validate that an argument is one of a fixed set of choices.

    :param choices: Accepted values
    :param name: Argument name (keyword lookup and error messages)
    :param param_index: Positional index of the argument
    :raises ValueError: If the value is not an accepted choice
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            value = _get_argument(args, kwargs, name, param_index)
            if value is not _MISSING and value not in choices:
                valid = ", ".join(sorted(str(c) for c in choices))
                raise ValueError(f'{name}="{value}" is not valid. Choose one of: {valid}')
            return func(*args, **kwargs)

        return wrapper

    return decorator

"""
Variadic helpers.

`get_last` returns its final positional argument. The overloads let a type
checker see that `get_last(1, 2.5, "x")` is a `str`, for up to six arguments;
beyond that the result is typed as `Any`.
"""

from typing import Any, TypeVar, overload

T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
T6 = TypeVar("T6")


@overload
def get_last(v1: T1) -> T1: ...
@overload
def get_last(v1: Any, v2: T2) -> T2: ...
@overload
def get_last(v1: Any, v2: Any, v3: T3) -> T3: ...
@overload
def get_last(v1: Any, v2: Any, v3: Any, v4: T4) -> T4: ...
@overload
def get_last(v1: Any, v2: Any, v3: Any, v4: Any, v5: T5) -> T5: ...
@overload
def get_last(v1: Any, v2: Any, v3: Any, v4: Any, v5: Any, v6: T6) -> T6: ...
@overload
def get_last(v1: Any, *rest: Any) -> Any: ...


def get_last(v1, *rest):
    """
    Return the last positional argument.

    At least one argument is required; calling with none raises TypeError
    like any missing positional parameter.
    """
    return rest[-1] if rest else v1

"""Try and Maybe containers for chaining fallible or optional computations.

Example:
    >>> from divergent.monads import attempt, maybe
    >>> attempt(lambda: 10 / 0).recover(ZeroDivisionError, lambda e: 0).get()
    0
    >>> maybe(None).or_else(maybe(5)).get()
    5
"""

from .maybe import Maybe, Nothing, Some, maybe
from .monad import Monad
from .result import Failure, Success, Try, attempt, sequence, traverse

__all__ = [
    # Shared contract
    "Monad",
    # Try
    "Try",
    "Success",
    "Failure",
    "attempt",
    "sequence",
    "traverse",
    # Maybe
    "Maybe",
    "Some",
    "Nothing",
    "maybe",
]

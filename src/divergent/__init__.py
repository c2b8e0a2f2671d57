"""Divergent: Try and Maybe containers for error and absence handling.

- Try: Success(value) or Failure(exception), built by running a computation
- Maybe: Some(value) or Nothing, built from a possibly-None value

Example:
    >>> from divergent import attempt, maybe
    >>> attempt(lambda: 10 / 0).get_or_else(-1)
    -1
    >>> maybe(None).or_else(maybe(5)).get()
    5
"""

import logging

from .config import DivergentSettings, clear_settings_cache, get_settings
from .errors import DivergentError, ErrorCode, NoSuchElementError, UnsupportedOperationError
from .monads import (
    Failure,
    Maybe,
    Monad,
    Nothing,
    Some,
    Success,
    Try,
    attempt,
    maybe,
    sequence,
    traverse,
)

__version__ = "0.1.0"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("divergent").addHandler(logging.NullHandler())

__all__ = [
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
    # Shared contract
    "Monad",
    # Errors
    "DivergentError",
    "ErrorCode",
    "NoSuchElementError",
    "UnsupportedOperationError",
    # Configuration
    "DivergentSettings",
    "get_settings",
    "clear_settings_cache",
]

"""fallible: Option and Result value types for Python 3.13+.

Flat imports (preferred):
    from fallible import Option, Some, Nothing, some, none
    from fallible import Result, Ok, Err, ok, err
    from fallible import is_missing, is_present, is_one_of

Submodule imports (for organization):
    from fallible.types import Option, Result
    from fallible.predicates import is_array_of
    from fallible.errors import InvalidArgumentError, IllegalStateError
"""

# Configuration and logging
from fallible._config import FallibleConfig, get_config, init
from fallible._logging import configure_logging, get_logger

# Faults
from fallible.errors import (
    FallibleError,
    IllegalState,
    IllegalStateError,
    InvalidArgument,
    InvalidArgumentError,
)

# Predicates
from fallible.predicates import (
    is_array,
    is_array_empty,
    is_array_of,
    is_function,
    is_missing,
    is_null,
    is_number,
    is_object,
    is_one_of,
    is_present,
    is_string,
    is_undefined,
)

# Types
from fallible.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    err,
    is_err,
    is_none,
    is_ok,
    is_option,
    is_result,
    is_some,
    none,
    ok,
    some,
)

__all__ = [
    "Err",
    "FallibleConfig",
    "FallibleError",
    "IllegalState",
    "IllegalStateError",
    "InvalidArgument",
    "InvalidArgumentError",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "configure_logging",
    "err",
    "get_config",
    "get_logger",
    "init",
    "is_array",
    "is_array_empty",
    "is_array_of",
    "is_err",
    "is_function",
    "is_missing",
    "is_none",
    "is_null",
    "is_number",
    "is_object",
    "is_ok",
    "is_one_of",
    "is_option",
    "is_present",
    "is_result",
    "is_some",
    "is_string",
    "is_undefined",
    "none",
    "ok",
    "some",
]

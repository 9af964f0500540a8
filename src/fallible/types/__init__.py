"""Core types: Option (Some, Nothing) and Result (Ok, Err)."""

from fallible.types.option import Nothing, NothingType, Option, Some, is_none, is_option, is_some, none, some
from fallible.types.result import Err, Ok, Result, err, is_err, is_ok, is_result, ok

__all__ = [
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "err",
    "is_err",
    "is_none",
    "is_ok",
    "is_option",
    "is_result",
    "is_some",
    "none",
    "ok",
    "some",
]

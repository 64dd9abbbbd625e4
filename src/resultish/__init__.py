"""Tri-state outcomes: success, failure, or both at once."""

from ._results import (
    NONE,
    Err,
    Failure,
    MutRef,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Outcome,
    Partial,
    Result,
    ResultUnwrapError,
    Some,
    Success,
)

__all__ = [
    "NONE",
    "Err",
    "Failure",
    "MutRef",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Outcome",
    "Partial",
    "Result",
    "ResultUnwrapError",
    "Some",
    "Success",
]

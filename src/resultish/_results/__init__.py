from ._option import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._outcome import Failure, Outcome, Partial, Success
from ._refs import MutRef
from ._result import Err, Ok, Result, ResultUnwrapError

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

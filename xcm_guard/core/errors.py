from enum import Enum


class ErrorKind(str, Enum):
    """Why a transfer request was refused. Carried as data on results."""

    STRUCTURAL = "structural_error"
    ROUTE_UNSUPPORTED = "route_unsupported"
    AMOUNT_OUT_OF_RANGE = "amount_out_of_range"
    UNKNOWN_BALANCE = "unknown_balance"

"""Return codes, their conversion, and the exceptions raised for failures."""

from __future__ import annotations

from enum import IntEnum


class Ret(IntEnum):
    """Middleware return codes."""

    OK = 0
    ERROR = 1
    TIMEOUT = 2
    UNSUPPORTED = 3
    BAD_ALLOC = 10
    INVALID_ARGUMENT = 11
    INCORRECT_RMW_IMPLEMENTATION = 12
    NODE_NAME_NON_EXISTENT = 203


class RcutilsRet(IntEnum):
    """Return codes of the underlying utility layer."""

    OK = 0
    WARN = 1
    ERROR = 2
    BAD_ALLOC = 10
    INVALID_ARGUMENT = 11
    NOT_ENOUGH_SPACE = 12
    NOT_INITIALIZED = 13
    NOT_FOUND = 14


class RmwError(Exception):
    """Base error carrying the middleware return code it stands for."""

    ret: Ret = Ret.ERROR

    def __init__(self, message: str = "", ret: Ret | int | None = None) -> None:
        super().__init__(message)
        if ret is not None:
            self.ret = Ret(ret)


class InvalidArgumentError(RmwError, ValueError):
    """An argument was missing or not in the expected state."""

    ret = Ret.INVALID_ARGUMENT


class BadAllocError(RmwError, MemoryError):
    """Storage could not be obtained."""

    ret = Ret.BAD_ALLOC


_RCUTILS_TO_RMW = {
    RcutilsRet.OK: Ret.OK,
    RcutilsRet.INVALID_ARGUMENT: Ret.INVALID_ARGUMENT,
    RcutilsRet.BAD_ALLOC: Ret.BAD_ALLOC,
    RcutilsRet.ERROR: Ret.ERROR,
}

_ERROR_CLASSES: dict[Ret, type[RmwError]] = {
    Ret.INVALID_ARGUMENT: InvalidArgumentError,
    Ret.BAD_ALLOC: BadAllocError,
}


def convert_rcutils_ret(rcutils_ret: RcutilsRet | int) -> Ret:
    """Map a utility-layer return code to a middleware return code.

    Codes without a counterpart map to ``Ret.ERROR``.
    """
    return _RCUTILS_TO_RMW.get(rcutils_ret, Ret.ERROR)


def raise_for_ret(ret: Ret | int) -> None:
    """Raise the exception matching ``ret``; do nothing for ``Ret.OK``."""
    code = Ret(ret)
    if code is Ret.OK:
        return
    error_class = _ERROR_CLASSES.get(code, RmwError)
    raise error_class(f"operation failed: {code.name}", code)
"""Validation of namespaces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from rmwcore.ret import InvalidArgumentError

TOPIC_MAX_NAME_LENGTH = 255 - 8
# Two characters are reserved for the shortest possible topic, e.g. '/X'.
NAMESPACE_MAX_LENGTH = TOPIC_MAX_NAME_LENGTH - 2


class NamespaceValidation(IntEnum):
    """Outcome codes of namespace validation."""

    VALID = 0
    INVALID_IS_EMPTY_STRING = 1
    INVALID_NOT_ABSOLUTE = 2
    INVALID_ENDS_WITH_FORWARD_SLASH = 3
    INVALID_CONTAINS_UNALLOWED_CHARACTERS = 4
    INVALID_CONTAINS_REPEATED_FORWARD_SLASH = 5
    INVALID_NAME_TOKEN_STARTS_WITH_NUMBER = 6
    INVALID_TOO_LONG = 7


@dataclass(frozen=True)
class NamespaceValidationResult:
    """The validation code and, when invalid, the offending index."""

    result: NamespaceValidation
    invalid_index: int | None = None

    @property
    def valid(self) -> bool:
        return self.result is NamespaceValidation.VALID


def _is_allowed(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in "_/"


def validate_namespace(namespace: str) -> NamespaceValidationResult:
    """Check ``namespace`` against the naming rules.

    The length limit is checked last, so a too-long result means every
    other rule passed.
    """
    if namespace is None:
        raise InvalidArgumentError("namespace argument is null")

    def invalid(code: NamespaceValidation, index: int) -> NamespaceValidationResult:
        return NamespaceValidationResult(code, index)

    if namespace == "/":
        return NamespaceValidationResult(NamespaceValidation.VALID)
    if not namespace:
        return invalid(NamespaceValidation.INVALID_IS_EMPTY_STRING, 0)
    if not namespace.startswith("/"):
        return invalid(NamespaceValidation.INVALID_NOT_ABSOLUTE, 0)
    if namespace.endswith("/"):
        return invalid(
            NamespaceValidation.INVALID_ENDS_WITH_FORWARD_SLASH, len(namespace) - 1
        )
    for index, char in enumerate(namespace):
        if not _is_allowed(char):
            return invalid(
                NamespaceValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, index
            )
    for index, (previous, char) in enumerate(zip(namespace, namespace[1:]), start=1):
        if previous == "/" and char == "/":
            return invalid(
                NamespaceValidation.INVALID_CONTAINS_REPEATED_FORWARD_SLASH, index
            )
        if previous == "/" and char.isdigit():
            return invalid(
                NamespaceValidation.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, index
            )
    if len(namespace) > NAMESPACE_MAX_LENGTH:
        return invalid(NamespaceValidation.INVALID_TOO_LONG, NAMESPACE_MAX_LENGTH - 1)
    return NamespaceValidationResult(NamespaceValidation.VALID)


_DESCRIPTIONS = {
    NamespaceValidation.INVALID_IS_EMPTY_STRING: "namespace must not be empty",
    NamespaceValidation.INVALID_NOT_ABSOLUTE: (
        "namespace must be absolute, it must lead with a '/'"
    ),
    NamespaceValidation.INVALID_ENDS_WITH_FORWARD_SLASH: (
        "namespace must not end with a '/', unless only a '/'"
    ),
    NamespaceValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS: (
        "namespace must not contain characters other than alphanumerics, '_', or '/'"
    ),
    NamespaceValidation.INVALID_CONTAINS_REPEATED_FORWARD_SLASH: (
        "namespace must not contain repeated '/'"
    ),
    NamespaceValidation.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER: (
        "namespace must not have a token that starts with a number"
    ),
    NamespaceValidation.INVALID_TOO_LONG: (
        f"namespace should not exceed '{NAMESPACE_MAX_LENGTH}'"
    ),
}


def namespace_validation_result_string(result: int) -> str | None:
    """Describe a validation code; ``None`` for a valid result."""
    if result == NamespaceValidation.VALID:
        return None
    try:
        return _DESCRIPTIONS[NamespaceValidation(result)]
    except ValueError:
        return "unknown result code for rmw namespace validation"
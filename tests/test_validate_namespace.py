import pytest

from rmwcore.ret import InvalidArgumentError
from rmwcore.validate_namespace import (
    NAMESPACE_MAX_LENGTH,
    NamespaceValidation,
    validate_namespace,
    namespace_validation_result_string,
)


def test_invalid_parameters():
    with pytest.raises(InvalidArgumentError):
        validate_namespace(None)
    assert (
        namespace_validation_result_string(-1)
        == "unknown result code for rmw namespace validation"
    )


@pytest.mark.parametrize("namespace", ["/", "/basename_only", "/with_one/heirarchy"])
def test_valid_namespace(namespace):
    outcome = validate_namespace(namespace)
    assert outcome.result is NamespaceValidation.VALID
    assert outcome.valid is True
    assert outcome.invalid_index is None
    assert namespace_validation_result_string(outcome.result) is None


@pytest.mark.parametrize(
    "namespace, expected, index",
    [
        ("", NamespaceValidation.INVALID_IS_EMPTY_STRING, 0),
        ("not_absolute", NamespaceValidation.INVALID_NOT_ABSOLUTE, 0),
        ("not/absolute", NamespaceValidation.INVALID_NOT_ABSOLUTE, 0),
        ("/ends/with/", NamespaceValidation.INVALID_ENDS_WITH_FORWARD_SLASH, 10),
        ("/~/unexpanded_tilde",
         NamespaceValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 1),
        ("/unexpanded_sub/{node}",
         NamespaceValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 16),
        ("/question?", NamespaceValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 9),
        ("/with spaces", NamespaceValidation.INVALID_CONTAINS_UNALLOWED_CHARACTERS, 5),
        ("/repeated//slashes",
         NamespaceValidation.INVALID_CONTAINS_REPEATED_FORWARD_SLASH, 10),
        ("/9starts_with_number",
         NamespaceValidation.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, 1),
        ("/starts/42with/number",
         NamespaceValidation.INVALID_NAME_TOKEN_STARTS_WITH_NUMBER, 8),
    ],
)
def test_invalid_namespaces(namespace, expected, index):
    outcome = validate_namespace(namespace)
    assert outcome.result is expected
    assert outcome.invalid_index == index
    assert outcome.valid is False
    description = namespace_validation_result_string(outcome.result)
    assert isinstance(description, str) and description


def test_topic_too_long():
    invalid_and_long = "a" * (NAMESPACE_MAX_LENGTH + 1)
    outcome = validate_namespace(invalid_and_long)
    assert outcome.result is NamespaceValidation.INVALID_NOT_ABSOLUTE
    assert outcome.invalid_index == 0

    valid_but_long = "/" + invalid_and_long
    outcome = validate_namespace(valid_but_long)
    assert outcome.result is NamespaceValidation.INVALID_TOO_LONG
    assert outcome.invalid_index == NAMESPACE_MAX_LENGTH - 1
    assert namespace_validation_result_string(outcome.result) is not None


def test_length_at_limit_is_valid():
    namespace = "/" + "a" * (NAMESPACE_MAX_LENGTH - 1)
    assert len(namespace) == NAMESPACE_MAX_LENGTH
    assert validate_namespace(namespace).result is NamespaceValidation.VALID


def test_result_strings_are_distinct():
    codes = [code for code in NamespaceValidation if code is not NamespaceValidation.VALID]
    descriptions = {namespace_validation_result_string(code) for code in codes}
    assert len(descriptions) == len(codes)
from __future__ import annotations

from typing import Any

import pytest

from cqrs_ddd_dto import (
    DTO,
    DTOOptions,
    TransformedValidationError,
    ValidationError,
)

# --- Test Models ---


class UserInputError(Exception):
    def __init__(self, fields: list[str], first: object = None) -> None:
        self.fields = fields
        self.first = first
        super().__init__(f"Invalid fields: {', '.join(fields)}")


# --- Tests ---


def test_get_data_raises_transformed_error(
    user_schema: Any, invalid_user: dict
) -> None:
    class UserDTO(
        DTO,
        schema=user_schema,
        transform_error=lambda error: UserInputError(error.fields),
    ):
        pass

    with pytest.raises(UserInputError) as exc_info:
        UserDTO(invalid_user).get_data()

    assert "email" in exc_info.value.fields
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_get_error_returns_transformed_error(
    user_schema: Any, invalid_user: dict
) -> None:
    class UserDTO(
        DTO,
        schema=user_schema,
        transform_error=lambda error: UserInputError(error.fields),
    ):
        pass

    error = UserDTO(invalid_user).get_error()

    assert isinstance(error, UserInputError)
    assert {"first", "last", "email"} <= set(error.fields)


def test_transform_is_applied_by_every_data_consumer(
    user_schema: Any, invalid_user: dict
) -> None:
    class UserDTO(
        DTO,
        schema=user_schema,
        transform_error=lambda error: UserInputError(error.fields),
    ):
        pass

    dto = UserDTO(invalid_user)

    for operation in (
        dto.get_data,
        lambda: dto.get_data_item("first"),
        dto.to_json_string,
        dto.to_hash,
        dto.to_search_params,
        dto.to_string,
        lambda: dto.equals(dto.clone()),
    ):
        with pytest.raises(UserInputError):
            operation()


def test_transform_receives_raw_unsafe_data(
    user_schema: Any, invalid_user: dict
) -> None:
    seen: list[object] = []

    def transform(error: ValidationError, raw: Any) -> UserInputError:
        seen.append(raw)
        return UserInputError(error.fields, first=raw["first"])

    class UserDTO(DTO, schema=user_schema, transform_error=transform):
        pass

    dto = UserDTO(invalid_user)

    with pytest.raises(UserInputError) as exc_info:
        dto.get_data()

    assert exc_info.value.first == "A"
    assert seen == [invalid_user]
    assert dto.get_error().first == "A"  # type: ignore[union-attr]


def test_transform_returning_plain_value_is_wrapped(
    user_schema: Any, invalid_user: dict
) -> None:
    def transform(error: ValidationError) -> dict[str, Any]:
        return {"status": 422, "fields": error.fields}

    class UserDTO(DTO, schema=user_schema, transform_error=transform):
        pass

    dto = UserDTO(invalid_user)

    with pytest.raises(TransformedValidationError) as exc_info:
        dto.get_data()

    assert exc_info.value.value["status"] == 422
    assert isinstance(exc_info.value.original, ValidationError)
    assert dto.get_error() == {
        "status": 422,
        "fields": exc_info.value.value["fields"],
    }


def test_transform_is_not_called_on_success(
    user_schema: Any, valid_user: dict
) -> None:
    calls: list[object] = []

    class UserDTO(
        DTO,
        schema=user_schema,
        transform_error=lambda error: calls.append(error) or error,
    ):
        pass

    dto = UserDTO(valid_user)
    dto.get_data()

    assert dto.get_error() is None
    assert calls == []


def test_is_valid_ignores_what_the_transform_returns(
    user_schema: Any, valid_user: dict, invalid_user: dict
) -> None:
    class UserDTO(DTO, schema=user_schema, transform_error=lambda error: None):
        pass

    invalid = UserDTO(invalid_user)

    assert invalid.is_valid() is False
    assert invalid.get_error() is None
    with pytest.raises(TransformedValidationError) as exc_info:
        invalid.get_data()
    assert exc_info.value.value is None
    assert UserDTO(valid_user).is_valid() is True


def test_transform_failures_are_still_not_cached(
    make_counting_schema: Any, user_schema: Any, invalid_user: dict
) -> None:
    schema = make_counting_schema(user_schema)

    class UserDTO(
        DTO,
        schema=schema,
        transform_error=lambda error: UserInputError(error.fields),
    ):
        pass

    dto = UserDTO(invalid_user)
    for _ in range(3):
        with pytest.raises(UserInputError):
            dto.get_data()

    assert schema.calls == 3


def test_subclass_can_override_only_the_transform(
    user_schema: Any, invalid_user: dict
) -> None:
    class UserDTO(DTO, schema=user_schema):
        pass

    class StrictUserDTO(
        UserDTO, transform_error=lambda error: UserInputError(error.fields)
    ):
        pass

    assert StrictUserDTO.get_schema() is user_schema
    assert isinstance(UserDTO(invalid_user).get_error(), ValidationError)
    assert isinstance(StrictUserDTO(invalid_user).get_error(), UserInputError)


def test_options_transform_arity_detection(user_schema: Any) -> None:
    error = ValidationError("bad")

    one_arg = DTOOptions(schema=user_schema, transform_error=lambda e: ("one", e))
    two_args = DTOOptions(
        schema=user_schema, transform_error=lambda e, raw: ("two", raw)
    )
    none = DTOOptions(schema=user_schema)

    assert one_arg.transform(error, {"raw": 1}) == ("one", error)
    assert two_args.transform(error, {"raw": 1}) == ("two", {"raw": 1})
    assert none.transform(error, {"raw": 1}) is error


def test_exception_class_as_transform(user_schema: Any, invalid_user: dict) -> None:
    class ApiValidationError(Exception):
        pass

    class UserDTO(DTO, schema=user_schema, transform_error=ApiValidationError):
        pass

    with pytest.raises(ApiValidationError) as exc_info:
        UserDTO(invalid_user).get_data()

    assert isinstance(exc_info.value.args[0], ValidationError)

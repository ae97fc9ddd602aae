"""Structural validation of ledger records before they reach the store.

Each validator takes a plain mapping (a decoded JSON body, a seed row) and
returns the validated input model, or raises
:class:`ledger.core.errors.ValidationError` naming the first offending field.
"""
from typing import Any, Mapping, Sequence, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ledger.core.errors import ValidationError
from ledger.schemas.account import AccountIn
from ledger.schemas.expense import ExpenseIn
from ledger.schemas.revenue import RevenueIn

ModelT = TypeVar("ModelT", bound=BaseModel)

# Error types whose message already names the field
_SELF_DESCRIBING = {"not_blank", "date_format"}
# FastAPI prefixes request errors with where the value came from
_LOCATION_PREFIXES = {"body", "query", "path"}


def describe_error(error: Mapping[str, Any]) -> ValidationError:
    loc = list(error.get("loc", ()))
    if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    field = ".".join(str(part) for part in loc) or "body"

    if error.get("type") == "missing" or ("input" in error and error["input"] is None):
        return ValidationError(field, f"{field} must not be null")
    if error.get("type") in _SELF_DESCRIBING:
        return ValidationError(field, error["msg"])
    return ValidationError(field, f"{field}: {error['msg']}")


def first_error(errors: Sequence[Mapping[str, Any]]) -> ValidationError:
    return describe_error(errors[0]) if errors else ValidationError("body", "Invalid request")


def validate_model(model: Type[ModelT], data: Mapping[str, Any]) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise first_error(exc.errors()) from exc


def validate_account(data: Mapping[str, Any]) -> AccountIn:
    return validate_model(AccountIn, data)


def validate_expense(data: Mapping[str, Any]) -> ExpenseIn:
    return validate_model(ExpenseIn, data)


def validate_revenue(data: Mapping[str, Any]) -> RevenueIn:
    return validate_model(RevenueIn, data)

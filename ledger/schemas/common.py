from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, PlainSerializer, StringConstraints, ValidationInfo
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

DATE_FORMAT = "%d-%m-%Y"


class ErrorObject(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class ResponseEnvelope(BaseModel):
    success: bool
    data: Any | None
    error: Optional[ErrorObject] = None


def make_success_response(data: Any) -> dict[str, Any]:
    return {"success": True, "data": data, "error": None}


def make_error_response(code: str, message: str, details: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    return {
        "success": False,
        "data": None,
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
        },
    }


class LedgerModel(BaseModel):
    """camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_ledger_date(value: Any, info: ValidationInfo) -> Any:
    if value is None or isinstance(value, date):
        # None falls through to the date validator and is reported as null
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except ValueError:
            pass
    raise PydanticCustomError(
        "date_format",
        "{field} must be a date formatted as dd-mm-yyyy",
        {"field": to_camel(info.field_name)},
    )


def not_blank(value: Any, info: ValidationInfo) -> Any:
    if isinstance(value, str) and not value.strip():
        raise PydanticCustomError("not_blank", "{field} must not be blank", {"field": to_camel(info.field_name)})
    return value


LedgerDate = Annotated[
    date,
    BeforeValidator(parse_ledger_date),
    PlainSerializer(lambda d: d.strftime(DATE_FORMAT), return_type=str, when_used="json"),
]

NonBlankStr = Annotated[str, StringConstraints(max_length=255), AfterValidator(not_blank)]

# validation.py (schemas)
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

M = TypeVar("M", bound=BaseModel)

ENUM_ERROR_TYPES = {"enum"}


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    kind: str
    loc: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"field": self.field, "message": self.message, "type": self.kind, "loc": list(self.loc)}


class ValidationError(ValueError):
    """A candidate record failed type, nullability or enum checks.

    Carries every offending field, never just the first one, so callers can
    build a field-level error display from ``errors`` or ``to_dict()``.
    """

    def __init__(self, shape: str, errors: List[FieldError]):
        self.shape = shape
        self.errors = list(errors)
        super().__init__(f"{shape}: invalid field(s) {', '.join(self.fields)}")

    @property
    def fields(self) -> List[str]:
        seen = []
        for err in self.errors:
            if err.field not in seen:
                seen.append(err.field)
        return seen

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": [err.to_dict() for err in self.errors]}


class InvalidEnumValue(ValidationError):
    """At least one closed-set field holds a value outside its set."""

    @property
    def enum_fields(self) -> List[str]:
        return [err.field for err in self.errors if err.kind in ENUM_ERROR_TYPES]


def _field_name(model: Type[BaseModel], loc: Tuple[Any, ...]) -> str:
    if not loc:
        return "__root__"
    head = loc[0]
    for name, info in model.model_fields.items():
        if head == name or head == info.alias:
            return name
    return str(head)


def _field_errors(model: Type[BaseModel], exc: PydanticValidationError) -> List[FieldError]:
    return [
        FieldError(
            field=_field_name(model, tuple(err["loc"])),
            message=err["msg"],
            kind=err["type"],
            loc=tuple(err["loc"]),
        )
        for err in exc.errors()
    ]


def validate(model: Type[M], data: Any) -> M:
    """Validate ``data`` against ``model`` and return the normalized instance."""
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        errors = _field_errors(model, exc)
        error_cls = ValidationError
        if any(err.kind in ENUM_ERROR_TYPES for err in errors):
            error_cls = InvalidEnumValue
        raise error_cls(model.__name__, errors) from None

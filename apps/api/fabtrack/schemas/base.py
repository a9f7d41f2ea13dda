"""
Schema base classes.

Request schemas read camelCase, are strict about types, reject non-finite
numbers and drop unknown fields. Response schemas read ORM objects and write
camelCase.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, create_model
from pydantic.alias_generators import to_camel


class RequestSchema(BaseModel):
    """Base for create/update payloads."""

    model_config = ConfigDict(
        strict=True,
        allow_inf_nan=False,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ResponseSchema(BaseModel):
    """Base for records returned to clients."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class RecordResponse(ResponseSchema):
    """Fields every stored record carries."""

    id: str
    created_at: datetime
    updated_at: datetime


def partial(model: type[RequestSchema], name: str | None = None) -> type[RequestSchema]:
    """
    Derive an update schema: every field optional, no defaults applied.

    A present field still runs the constraint it carries in ``model``.
    """
    fields: dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (Optional[annotation], None)

    return create_model(
        name or model.__name__.replace("Create", "Update"),
        __base__=RequestSchema,
        __module__=model.__module__,
        **fields,
    )

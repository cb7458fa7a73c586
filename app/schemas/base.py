from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    # Naive values are taken to be UTC already (SQLite hands them back that way)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Wire schema with camelCase JSON keys; snake_case keys are accepted on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelResponse(CamelModel):
    """Response schema populated from ORM rows"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

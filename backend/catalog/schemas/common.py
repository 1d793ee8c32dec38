"""Shared pieces of the request/response schemas."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_pascal


class CatalogSchema(BaseModel):
    """Base schema: PascalCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


def not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


NameStr = Annotated[str, StringConstraints(min_length=1, max_length=100), AfterValidator(not_blank)]
SlugStr = Annotated[str, StringConstraints(min_length=1, max_length=150), AfterValidator(not_blank)]
DescriptionStr = Annotated[str, StringConstraints(min_length=1, max_length=5000), AfterValidator(not_blank)]

"""
Base schemas for all models.

Draft payloads travel to and from the UI layer in camelCase, so every schema
aliases its snake_case attributes and accepts either spelling on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base for all schemas.

    Features:
        - camelCase aliases, populate by either name
        - Validate on attribute assignment
        - Allow ORM-style objects (from_attributes)

    Strings are not stripped: drafts hold raw keystroke text and the
    validators decide what blank means.
    """
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        validate_assignment=True
    )


class FrozenSchema(BaseSchema):
    """Immutable schema. Changes go through model_copy / model_validate."""
    model_config = ConfigDict(frozen=True)

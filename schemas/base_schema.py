"""Shared pydantic base for request and response models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model that reads and writes camelCase JSON while keeping snake_case attributes.

    Both spellings are accepted on input, so callers may send either
    `ingredientsToAvoid` or `ingredients_to_avoid`.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

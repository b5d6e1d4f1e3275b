"""Shared pydantic base for models that travel as camelCase JSON."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with snake_case attributes and camelCase wire names.

    AI backend payloads and template library files use camelCase keys
    (``semanticFeatures``, ``textType``, ``splitPoints``); either spelling is
    accepted on input, and ``model_dump(by_alias=True)`` restores camelCase.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

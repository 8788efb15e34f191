"""Base model for API view shapes.

The REST API speaks camelCase; models use snake_case attributes and keep
the API's field names on the wire (``by_alias`` when dumping).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """A read-only mirror of a JSON shape owned by the REST API."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

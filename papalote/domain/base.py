"""
Base model for domain entities

Fixtures and API payloads use camelCase keys; Python code uses snake_case.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Pydantic model that reads and writes camelCase JSON"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary with camelCase keys"""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)

"""
Base models for all PushBullet entities

Provides common functionality for data validation, serialization, and API interaction.
"""
from pydantic import BaseModel, Field
from typing import Dict, Any


class PushbulletBaseModel(BaseModel):
    """Base model for all pb-async models with common functionality."""

    model_config = {
        "validate_assignment": True,
        "use_enum_values": True,
        "populate_by_name": True,
    }

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.model_dump(exclude_none=True).items())
        return f"{self.__class__.__name__}({fields})"

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """Convert model to dictionary, optionally excluding None values."""
        return self.model_dump(exclude_none=exclude_none)

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]):
        """Create model instance from API response data."""
        if not data:
            raise ValueError(f"Cannot create {cls.__name__} from empty data")
        return cls(**data)


class PushbulletObject(PushbulletBaseModel):
    """Base for server-side objects that carry an identifier and timestamps."""

    iden: str = Field(..., description="Unique identifier")
    created: float = Field(..., description="Creation timestamp in unix time")
    modified: float = Field(..., description="Last modified timestamp in unix time")

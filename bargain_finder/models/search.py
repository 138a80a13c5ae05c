"""Search data models"""

from pydantic import BaseModel, Field
from enum import Enum
from typing import List, Optional
from .listing import ClassifiedListing


class SearchType(str, Enum):
    """Search modes supported by the properties endpoint"""
    BARGAIN = "bargain"
    FIXER = "fixer"
    SCHOOL = "school"
    SUBWAY = "subway"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SearchType":
        """Resolve a query value, falling back to BARGAIN for unknown or missing values."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.BARGAIN


class RefinementCriteria(BaseModel):
    """Narrowing applied to an already-classified result list"""
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    property_type: Optional[str] = None
    tag: Optional[str] = None

    def is_empty(self) -> bool:
        return (
            self.min_price is None
            and self.max_price is None
            and not self.property_type
            and not self.tag
        )


class PropertiesResponse(BaseModel):
    """Body of a successful properties search"""
    properties: List[ClassifiedListing]


class ErrorResponse(BaseModel):
    """Body returned with a non-2xx status"""
    error: str
    details: Optional[str] = None


class ProbeResponse(BaseModel):
    """Liveness and configuration probe"""
    message: str
    api_key_configured: bool = Field(alias="apiKeyConfigured")

    class Config:
        populate_by_name = True

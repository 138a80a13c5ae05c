"""Classified listing data models"""

from pydantic import BaseModel, Field
from enum import Enum
from typing import List, Union


class TagLabel(str, Enum):
    """Bargain criterion labels, in the fixed order they are evaluated"""
    LONG_TIME_NO_SOLD = "long time no sold"
    REPOSTED = "reposted"
    SELLING_AT_A_LOSS = "selling at a loss"
    SELLING_AT_HUGE_PROFIT = "selling at huge profit"
    QUICKY = "quicky"
    LAST_DEAL_FELL_THROUGH = "last deal fell through"
    ESTATE_SELL = "estate sell"


class ClassifiedListing(BaseModel):
    """Listing as returned to clients, produced once per search"""
    mls_number: str = Field("", alias="mlsNumber")
    address: str
    asking_price: Union[int, float] = Field(0, alias="askingPrice")
    property_type: str = Field("Unknown", alias="propertyType")
    thumbnail: str = ""
    realtor_ca_link: str = Field("", alias="realtorCaLink")
    tags: List[TagLabel] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        frozen = True
        use_enum_values = True

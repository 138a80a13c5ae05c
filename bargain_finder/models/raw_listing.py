"""
Read-only view over a raw listing record from the listings provider.

The provider owns the record schema and several fields have alternate names.
Every accessor here degrades to an "absent" value (None, empty string) when a
field is missing or malformed, so one bad record never fails a whole batch.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

Number = Union[int, float]


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into a naive UTC datetime.

    Date-only strings are read as midnight UTC. Offsets (including a trailing
    ``Z``) are converted to UTC before the tzinfo is dropped.

    Args:
        value: Raw field value

    Returns:
        Naive UTC datetime, or None if the value is empty or unparseable
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            return None
    return parsed


def parse_number(value: Any) -> Optional[Number]:
    """Parse a numeric field that may arrive as a number or a numeric string.

    Returns:
        int or float value, or None if the value is not numeric
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and value.strip():
        try:
            number = float(value.replace(",", "").strip())
        except ValueError:
            return None
        return int(number) if number.is_integer() else number
    return None


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


@dataclass(frozen=True)
class RawListing:
    """Accessor layer over one provider listing record.

    Attributes:
        data: The record exactly as received from the provider
    """
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def wrap(cls, record: Any) -> 'RawListing':
        """Wrap a provider record, treating non-dict entries as empty records."""
        if isinstance(record, RawListing):
            return record
        return cls(record if isinstance(record, dict) else {})

    def _section(self, name: str) -> Dict[str, Any]:
        value = self.data.get(name)
        return value if isinstance(value, dict) else {}

    @property
    def mls_number(self) -> str:
        return _text(self.data.get("mlsNumber") or self.data.get("mls"))

    @property
    def list_price(self) -> Optional[Number]:
        return parse_number(self.data.get("listPrice"))

    @property
    def asking_price(self) -> Number:
        """Current price shown to users: ``listPrice``, then ``price``, else 0."""
        return (
            parse_number(self.data.get("listPrice"))
            or parse_number(self.data.get("price"))
            or 0
        )

    @property
    def original_price(self) -> Optional[Number]:
        """Previous purchase price: ``originalPrice``, falling back to ``soldPrice``.

        Zero is treated as absent.
        """
        return (
            parse_number(self.data.get("originalPrice"))
            or parse_number(self.data.get("soldPrice"))
            or None
        )

    @property
    def simple_days_on_market(self) -> Optional[Number]:
        # Explicit zero is a real value here
        return parse_number(self.data.get("simpleDaysOnMarket"))

    @property
    def list_date(self) -> Optional[datetime]:
        return parse_timestamp(self.data.get("listDate"))

    @property
    def property_type(self) -> str:
        return _text(self._section("details").get("propertyType") or self.data.get("type"))

    @property
    def description(self) -> str:
        return _text(self._section("details").get("description"))

    @property
    def thumbnail(self) -> str:
        images = self.data.get("images")
        if isinstance(images, list) and images:
            return _text(images[0])
        return ""

    @property
    def address(self) -> Dict[str, Any]:
        return self._section("address")

    @property
    def terminated_date(self) -> Optional[datetime]:
        return parse_timestamp(self._section("timestamps").get("terminatedDate"))

    @property
    def possession_date(self) -> Optional[datetime]:
        return parse_timestamp(self._section("timestamps").get("possessionDate"))

    @property
    def conditional_expiry_date(self) -> Any:
        """Raw conditional expiry value; only its presence matters."""
        return self._section("timestamps").get("conditionalExpiryDate")

    @property
    def closed_date(self) -> Any:
        """Raw closed date value; only its presence matters."""
        return self._section("timestamps").get("closedDate")

    @property
    def latitude(self) -> Optional[Number]:
        return parse_number(self._section("map").get("latitude"))

    @property
    def longitude(self) -> Optional[Number]:
        return parse_number(self._section("map").get("longitude"))

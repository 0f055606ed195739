"""Types for entity field values."""

from typing import TypeAlias, TypedDict

# Field values nest without a depth limit.
FieldValue: TypeAlias = "str | int | float | bool | None | list[FieldValue] | dict[str, FieldValue]"


class AddressValue(TypedDict, total=False):
    """An address specifying a physical location."""

    line1: str
    line2: str
    line3: str
    sublocality: str
    city: str
    region: str
    postalCode: str
    countryCode: str
    extraDescription: str

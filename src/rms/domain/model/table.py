"""Restaurant table.

Tables are managed outside the order lifecycle; orders only hold a
reference to one.
"""

from __future__ import annotations

from dataclasses import dataclass

from rms.domain.exceptions import ValidationError


@dataclass
class RestaurantTable:

    id: int | None
    number: int
    capacity: int
    location: str | None = None

    @staticmethod
    def create(number: int, capacity: int, location: str | None = None) -> RestaurantTable:
        if number <= 0:
            raise ValidationError("Table number must be positive")
        if capacity <= 0:
            raise ValidationError("Table capacity must be positive")
        return RestaurantTable(id=None, number=number, capacity=capacity, location=location)

"""Customer class with an append-only rental history."""

from typing import TYPE_CHECKING, List, Tuple

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .vehicle import Vehicle


class Customer:
    """A renter. History entries are references back into the fleet."""

    def __init__(self, customer_id: str, name: str):
        for field, value in (("ID", customer_id), ("name", name)):
            if not isinstance(value, str) or not value:
                raise InvalidArgumentError(
                    f"Invalid customer details: {field} must be a non-empty string, "
                    f"got {value!r}"
                )
        self.customer_id = customer_id
        self.name = name
        self._history: List["Vehicle"] = []

    @property
    def rental_history(self) -> Tuple["Vehicle", ...]:
        """Vehicles rented so far, oldest first. Read-only."""
        return tuple(self._history)

    @property
    def rental_count(self) -> int:
        return len(self._history)

    def add_rental(self, vehicle: "Vehicle") -> None:
        self._history.append(vehicle)

    def __repr__(self) -> str:
        return f"Customer({self.customer_id!r}, {self.name!r})"

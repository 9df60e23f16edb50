"""Rental notifications: events emitted on availability transitions."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional

if TYPE_CHECKING:
    from .customer import Customer
    from .vehicle import Vehicle

logger = logging.getLogger(__name__)


class EventAction(Enum):
    RENTED = "rented"
    RETURNED = "returned"


@dataclass
class RentalEvent:
    """A vehicle changed state."""

    action: EventAction
    vehicle: "Vehicle"
    customer: Optional["Customer"] = None
    days: Optional[int] = None

    @property
    def message(self) -> str:
        label = self.vehicle.kind.label
        if self.action is EventAction.RENTED:
            return f"{label} rented by {self.customer.name} for {self.days} days."
        return f"{label} has been returned."

    def __str__(self) -> str:
        return self.message


Observer = Callable[[RentalEvent], None]


def log_event(event: RentalEvent) -> None:
    """Default observer: write the event message to the log."""
    logger.info("%s", event)


class Notifier:
    """Fan-out of rental events to a list of observers."""

    def __init__(self, observers: Optional[List[Observer]] = None):
        self.observers: List[Observer] = (
            list(observers) if observers is not None else [log_event]
        )

    def subscribe(self, observer: Observer) -> None:
        self.observers.append(observer)

    def notify(self, event: RentalEvent) -> None:
        for observer in self.observers:
            observer(event)

"""Raw inputs to the marine tracking aggregation.

These are the already-fetched rows handed over by a tracking source: one
TrackingEvent per carrier milestone report, one ShipmentRecord per planned
marine leg or truck movement.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ShipmentType(Enum):
    MARINE = "Marine"
    TRUCK_30 = "Truck30"


@dataclass(frozen=True)
class TrackingEvent:
    """A single tracking event reported against a booking."""

    booking_number: str
    action_type: str
    order_id: str | None = None
    event_name: str | None = None
    location_name: str | None = None
    actual_time: datetime | None = None
    predicted_time: datetime | None = None
    carrier_planned_time: datetime | None = None
    last_processed_time: datetime | None = None


@dataclass(frozen=True)
class ShipmentRecord:
    """A shipment leg attached to a booking."""

    booking_number: str
    shipment_type: ShipmentType
    shipment_number: str | None = None
    container_id: str | None = None
    executing_carrier_name: str | None = None
    vessel_name: str | None = None
    voyage_number: str | None = None
    planned_start: datetime | None = None
    planned_end: datetime | None = None
    actual_start: datetime | None = None
    actual_end: datetime | None = None

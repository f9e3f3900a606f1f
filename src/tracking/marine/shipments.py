"""Shipment join — attaches marine legs and truck movements to bookings.

Shipment collections arrive already filtered by type. A collection that was
never fetched (``None``) is kept apart from one that was fetched and came back
empty: the former yields ``None`` per booking, the latter an empty tuple.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import TypeAlias

from tracking.marine.records import ShipmentRecord

# None means "this shipment type was not queried"
ShipmentCollection: TypeAlias = Sequence[ShipmentRecord] | None


@dataclass(frozen=True)
class MarineShipmentSummary:
    executing_carrier_name: str | None = None
    vessel_name: str | None = None
    voyage_number: str | None = None
    actual_start: datetime | None = None
    actual_end: datetime | None = None
    planned_start: datetime | None = None
    planned_end: datetime | None = None

    @classmethod
    def from_record(cls, record: ShipmentRecord) -> "MarineShipmentSummary":
        return cls(
            executing_carrier_name=record.executing_carrier_name,
            vessel_name=record.vessel_name,
            voyage_number=record.voyage_number,
            actual_start=record.actual_start,
            actual_end=record.actual_end,
            planned_start=record.planned_start,
            planned_end=record.planned_end,
        )


@dataclass(frozen=True)
class TruckShipmentSummary:
    shipment_number: str | None = None
    container_id: str | None = None
    shipment_type_description: str | None = None

    @classmethod
    def from_record(cls, record: ShipmentRecord) -> "TruckShipmentSummary":
        return cls(
            shipment_number=record.shipment_number,
            container_id=record.container_id,
            shipment_type_description=record.shipment_type.value,
        )


@dataclass(frozen=True)
class BookingShipments:
    marine: tuple[MarineShipmentSummary, ...] | None = ()
    truck: tuple[TruckShipmentSummary, ...] | None = ()


def _matching(records: ShipmentCollection, booking_number: str, summarize) -> tuple | None:
    if records is None:
        return None
    return tuple(summarize(record) for record in records if record.booking_number == booking_number)


def join_shipments(
    booking_numbers: Iterable[str],
    marine_records: ShipmentCollection,
    truck_records: ShipmentCollection,
) -> dict[str, BookingShipments]:
    """Match marine and truck records to each booking, preserving record order."""
    return {
        booking_number: BookingShipments(
            marine=_matching(marine_records, booking_number, MarineShipmentSummary.from_record),
            truck=_matching(truck_records, booking_number, TruckShipmentSummary.from_record),
        )
        for booking_number in booking_numbers
    }

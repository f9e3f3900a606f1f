"""Fake tracking source — in-memory tracking data for testing and development.

Holds plain lists of records instead of querying projections. Every call is
recorded so tests can assert which fetches a query issued.
"""

from collections.abc import Iterable

from tracking.marine.records import ShipmentRecord, ShipmentType, TrackingEvent
from tracking.sources.port import TrackingSource


class FakeTrackingSource(TrackingSource):
    """In-memory tracking source."""

    def __init__(
        self,
        order_ship_tos: dict[str, str] | None = None,
        events: list[TrackingEvent] | None = None,
        shipments: list[ShipmentRecord] | None = None,
    ) -> None:
        self.order_ship_tos: dict[str, str] = dict(order_ship_tos or {})
        self.events: list[TrackingEvent] = list(events or [])
        self.shipments: list[ShipmentRecord] = list(shipments or [])
        self.unavailable_types: set[ShipmentType] = set()
        self.calls: list[dict] = []

    def configure(self, unavailable_types: Iterable[ShipmentType] = ()) -> None:
        """Mark shipment types the source cannot serve (fetches return None)."""
        self.unavailable_types = set(unavailable_types)

    def resolve_authorized_order_ids(
        self,
        authorized_ship_to_ids: Iterable[str],
        requested_order_ids: Iterable[str] | None = None,
    ) -> list[str]:
        authorized = set(authorized_ship_to_ids)
        requested = set(requested_order_ids or [])
        self.calls.append(
            {
                "method": "resolve_authorized_order_ids",
                "authorized_ship_to_ids": authorized,
                "requested_order_ids": requested,
            }
        )

        return sorted(
            order_id
            for order_id, ship_to_id in self.order_ship_tos.items()
            if ship_to_id in authorized and (not requested or order_id in requested)
        )

    def fetch_tracking_events_by_orders(self, order_ids: Iterable[str]) -> list[TrackingEvent]:
        wanted = set(order_ids)
        self.calls.append({"method": "fetch_tracking_events_by_orders", "order_ids": wanted})
        return [event for event in self.events if event.order_id in wanted]

    def fetch_tracking_events_by_booking_numbers(self, booking_numbers: Iterable[str]) -> list[TrackingEvent]:
        wanted = set(booking_numbers)
        self.calls.append({"method": "fetch_tracking_events_by_booking_numbers", "booking_numbers": wanted})
        return [event for event in self.events if event.booking_number in wanted]

    def fetch_shipments_by_booking_and_type(
        self,
        booking_numbers: Iterable[str],
        shipment_type: ShipmentType,
    ) -> list[ShipmentRecord] | None:
        wanted = set(booking_numbers)
        self.calls.append(
            {
                "method": "fetch_shipments_by_booking_and_type",
                "booking_numbers": wanted,
                "shipment_type": shipment_type,
            }
        )

        if shipment_type in self.unavailable_types:
            return None
        return [
            shipment
            for shipment in self.shipments
            if shipment.shipment_type == shipment_type and shipment.booking_number in wanted
        ]

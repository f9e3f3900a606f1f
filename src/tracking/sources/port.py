"""Tracking source port — abstract interface to the tracking data stores.

The marine tracking query programs against this port; adapters decide where
order assignments, tracking events and shipments come from.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from tracking.marine.records import ShipmentRecord, ShipmentType, TrackingEvent


class TrackingSource(ABC):
    """Abstract interface for tracking data adapters."""

    @abstractmethod
    def resolve_authorized_order_ids(
        self,
        authorized_ship_to_ids: Iterable[str],
        requested_order_ids: Iterable[str] | None = None,
    ) -> list[str]:
        """Return the orders shipping to one of ``authorized_ship_to_ids``.

        When ``requested_order_ids`` is given and non-empty, only those of
        the requested orders that are authorized are returned.
        """
        ...

    @abstractmethod
    def fetch_tracking_events_by_orders(self, order_ids: Iterable[str]) -> list[TrackingEvent]:
        """Return every tracking event recorded against the given orders."""
        ...

    @abstractmethod
    def fetch_tracking_events_by_booking_numbers(self, booking_numbers: Iterable[str]) -> list[TrackingEvent]:
        """Return every tracking event recorded against the given bookings."""
        ...

    @abstractmethod
    def fetch_shipments_by_booking_and_type(
        self,
        booking_numbers: Iterable[str],
        shipment_type: ShipmentType,
    ) -> list[ShipmentRecord] | None:
        """Return the shipments of one type attached to the given bookings.

        Returns None when the source holds no collection for ``shipment_type``.
        """
        ...

"""Pydantic API schemas for the Tracking domain.

These are the external API contracts — separate from the aggregation's
value records. The routes translate between the two.
"""

from datetime import datetime

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class MilestoneResponse(BaseModel):
    event_name: str | None = None
    location_name: str | None = None
    actual_time: datetime | None = None
    predicted_time: datetime | None = None
    carrier_planned_time: datetime | None = None
    last_processed_time: datetime | None = None


class RecentActivityResponse(BaseModel):
    preparation: MilestoneResponse | None = None
    in_transit: MilestoneResponse | None = None


class MarineShipmentResponse(BaseModel):
    executing_carrier_name: str | None = None
    vessel_name: str | None = None
    voyage_number: str | None = None
    actual_start: datetime | None = None
    actual_end: datetime | None = None
    planned_start: datetime | None = None
    planned_end: datetime | None = None


class TruckShipmentResponse(BaseModel):
    shipment_number: str | None = None
    container_id: str | None = None
    shipment_type_description: str | None = None


class BookingResponse(BaseModel):
    booking_number: str
    earliest_etd: datetime | None = None
    earliest_eta: datetime | None = None
    marine_shipments: list[MarineShipmentResponse] | None = None
    truck_shipments: list[TruckShipmentResponse] | None = None
    departure: MilestoneResponse | None = None
    arrival: MilestoneResponse | None = None
    # Left unset (and so omitted) unless recent activity was requested
    recent_activity: RecentActivityResponse | None = None


class OrderTrackingResponse(BaseModel):
    order_id: str
    earliest_etd: datetime | None = None
    earliest_eta: datetime | None = None
    bookings: list[BookingResponse]


class MarineTrackingsResponse(BaseModel):
    marine_trackings: list[OrderTrackingResponse]

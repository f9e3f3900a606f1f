"""Tracking events — one row per milestone reported by the carrier visibility feed."""

from protean.fields import DateTime, Identifier, String

from tracking.domain import tracking


@tracking.projection
class TrackingEventView:
    event_id = Identifier(identifier=True, required=True)
    order_id = Identifier(required=True)
    # Feed rows are stored as received; the tracking source rejects incomplete ones
    booking_number = String(max_length=50)
    action_type = String(max_length=100)
    event_name = String(max_length=200)
    location_name = String(max_length=200)
    actual_time = DateTime()
    predicted_time = DateTime()
    carrier_planned_time = DateTime()
    last_processed_time = DateTime()

"""Shipments — marine legs and truck movements planned against a booking."""

from protean.fields import DateTime, Identifier, String

from tracking.domain import tracking


@tracking.projection
class ShipmentView:
    shipment_number = Identifier(identifier=True, required=True)
    booking_number = String(required=True, max_length=50)
    shipment_type = String(required=True, max_length=30)
    container_id = String(max_length=50)
    executing_carrier_name = String(max_length=200)
    vessel_name = String(max_length=200)
    voyage_number = String(max_length=50)
    planned_start = DateTime()
    planned_end = DateTime()
    actual_start = DateTime()
    actual_end = DateTime()

"""Order ship-to assignments — which ship-to location each order delivers to.

Drives permission resolution: a caller may see an order only when the order's
ship-to location is among the caller's authorized locations.
"""

from protean.fields import Identifier, String

from tracking.domain import tracking


@tracking.projection
class OrderShipToView:
    order_id = Identifier(identifier=True, required=True)
    ship_to_id = Identifier(required=True)
    customer_name = String(max_length=200)

"""Tracking bounded context — Marine Shipment Visibility.

Answers "what is the consolidated marine tracking status of the orders I can
see?" from carrier tracking events and shipment records. Read-only: the
projections are fed by the carrier visibility feed, and every request is a
pure aggregation over what the projections hold.
"""

from protean.domain import Domain

from tracking.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
tracking = Domain(name="tracking")

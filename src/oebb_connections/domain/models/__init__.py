"""Domain models for ÖBB connections."""

from oebb_connections.domain.models.admissibility_policy import AdmissibilityPolicy
from oebb_connections.domain.models.connection import Connection
from oebb_connections.domain.models.correlation_key import CorrelationKey
from oebb_connections.domain.models.error_details import ErrorDetails
from oebb_connections.domain.models.journey import Journey
from oebb_connections.domain.models.leg import Leg, Line
from oebb_connections.domain.models.refresh_request import RefreshRequest
from oebb_connections.domain.models.refresh_result import RefreshResult
from oebb_connections.domain.models.route_configuration import RouteConfiguration
from oebb_connections.domain.models.station import Station
from oebb_connections.domain.models.transport_catalog import TransportCatalog
from oebb_connections.domain.models.transport_product import TransportProduct

__all__ = [
    "AdmissibilityPolicy",
    "Connection",
    "CorrelationKey",
    "ErrorDetails",
    "Journey",
    "Leg",
    "Line",
    "RefreshRequest",
    "RefreshResult",
    "RouteConfiguration",
    "Station",
    "TransportCatalog",
    "TransportProduct",
]

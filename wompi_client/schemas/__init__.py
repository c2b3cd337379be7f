"""
Schemas de configuración, checkout y eventos.
"""

from wompi_client.schemas.client import ClientConfig, CheckoutConfig
from wompi_client.schemas.checkout import CheckoutRequest
from wompi_client.schemas.event import (
    EventData,
    EventSignature,
    EventTransaction,
    TransactionEvent,
)

__all__ = [
    "ClientConfig",
    "CheckoutConfig",
    "CheckoutRequest",
    "EventData",
    "EventSignature",
    "EventTransaction",
    "TransactionEvent",
]

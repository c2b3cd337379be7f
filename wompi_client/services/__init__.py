"""
Servicios del cliente de Wompi.
"""

from wompi_client.services.checkout_service import build_checkout_url
from wompi_client.services.transaction_service import (
    CONNECTION_ERROR_MESSAGE,
    check_transaction_status_by_id,
    get_transaction_status,
)

__all__ = [
    "build_checkout_url",
    "CONNECTION_ERROR_MESSAGE",
    "check_transaction_status_by_id",
    "get_transaction_status",
]

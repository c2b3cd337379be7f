"""
Cliente de Wompi: URLs de Web Checkout, validación de eventos y consulta
de transacciones.
"""

from wompi_client.adapters import (
    GatewayError,
    ResultStatus,
    TransactionFound,
    TransactionResult,
    TransportError,
    UnknownError,
    create_client,
)
from wompi_client.schemas import (
    CheckoutConfig,
    CheckoutRequest,
    ClientConfig,
    TransactionEvent,
)
from wompi_client.services import (
    CONNECTION_ERROR_MESSAGE,
    build_checkout_url,
    check_transaction_status_by_id,
    get_transaction_status,
)
from wompi_client.utils import (
    InvalidArgumentError,
    MalformedEventError,
    WompiError,
    build_event_checksum,
    build_integrity_signature,
    hash_value,
    validate_checksum,
)

__version__ = "1.0.0"

__all__ = [
    # Cliente
    "ClientConfig",
    "create_client",
    "get_transaction_status",
    "check_transaction_status_by_id",
    "CONNECTION_ERROR_MESSAGE",
    # Resultados
    "ResultStatus",
    "TransactionFound",
    "GatewayError",
    "TransportError",
    "UnknownError",
    "TransactionResult",
    # Checkout
    "CheckoutConfig",
    "CheckoutRequest",
    "build_checkout_url",
    # Eventos
    "TransactionEvent",
    "validate_checksum",
    "build_event_checksum",
    # Firmas
    "hash_value",
    "build_integrity_signature",
    # Excepciones
    "WompiError",
    "InvalidArgumentError",
    "MalformedEventError",
]

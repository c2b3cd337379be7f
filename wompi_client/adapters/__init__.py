"""
Cliente HTTP y resultados normalizados de la API de Wompi.
"""

from wompi_client.adapters.base import (
    ResultStatus,
    TransactionFound,
    GatewayError,
    TransportError,
    UnknownError,
    TransactionResult,
)
from wompi_client.adapters.http_client import create_client

__all__ = [
    "ResultStatus",
    "TransactionFound",
    "GatewayError",
    "TransportError",
    "UnknownError",
    "TransactionResult",
    "create_client",
]

"""
Utilidades de hash y firmas.
"""

from wompi_client.utils.hashing import hash_value
from wompi_client.utils.signatures import (
    build_integrity_signature,
    build_event_checksum,
    validate_checksum,
)
from wompi_client.utils.exceptions import (
    WompiError,
    InvalidArgumentError,
    MalformedEventError,
)

__all__ = [
    # Hash
    "hash_value",
    # Firmas
    "build_integrity_signature",
    "build_event_checksum",
    "validate_checksum",
    # Excepciones
    "WompiError",
    "InvalidArgumentError",
    "MalformedEventError",
]

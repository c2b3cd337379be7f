"""
Firmas de integridad y checksums de eventos de Wompi.

Ambos valores son un SHA-256 sobre la concatenación directa (sin
separadores) de campos fijos más un secreto. El orden y el formato deben
coincidir exactamente con el cálculo de Wompi.
"""

import hmac
from typing import Any, Mapping

import structlog
from pydantic import ValidationError

from wompi_client.schemas.event import TransactionEvent
from wompi_client.utils.exceptions import InvalidArgumentError, MalformedEventError
from wompi_client.utils.hashing import hash_value


logger = structlog.get_logger(__name__)


def _require_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(name, "str", value)
    return value


def build_integrity_signature(
    reference: str,
    amount_in_cents: int,
    currency: str,
    integrity_secret: str,
    expiration_date: str | None = None,
) -> str:
    """
    Genera la firma de integridad para el Web Checkout.

    Se calcula sobre: "<reference><amount_in_cents><currency><integrity_secret><expiration_date>"

    Args:
        reference: Referencia de la transacción
        amount_in_cents: Monto en centavos (entero >= 0)
        currency: Código de moneda ISO 4217
        integrity_secret: Secreto de integridad del comercio
        expiration_date: Fecha de expiración ISO 8601 (opcional)

    Returns:
        Firma hexadecimal

    Raises:
        InvalidArgumentError: Si algún argumento no tiene el tipo esperado
    """
    _require_str("reference", reference)
    _require_str("currency", currency)
    _require_str("integrity_secret", integrity_secret)

    # bool es subclase de int
    if isinstance(amount_in_cents, bool) or not isinstance(amount_in_cents, int):
        raise InvalidArgumentError("amount_in_cents", "int", amount_in_cents)
    if amount_in_cents < 0:
        raise InvalidArgumentError("amount_in_cents", "non-negative int", amount_in_cents)

    if expiration_date is None:
        expiration_date = ""
    _require_str("expiration_date", expiration_date)

    return hash_value(
        f"{reference}{amount_in_cents}{currency}{integrity_secret}{expiration_date}"
    )


def parse_event(event: TransactionEvent | Mapping[str, Any]) -> TransactionEvent:
    """
    Convierte el payload de un evento en un TransactionEvent.

    Raises:
        MalformedEventError: Si faltan campos requeridos
    """
    if isinstance(event, TransactionEvent):
        return event

    if not isinstance(event, Mapping):
        raise MalformedEventError(f"expected a mapping, got {type(event).__name__}")

    try:
        return TransactionEvent.model_validate(event)
    except ValidationError as e:
        raise MalformedEventError(str(e)) from e


def build_event_checksum(
    event: TransactionEvent | Mapping[str, Any],
    event_key: str,
) -> str:
    """
    Calcula el checksum de un evento.

    Se calcula sobre: "<transaction.id><transaction.status><transaction.amount_in_cents><timestamp><event_key>"

    Args:
        event: Evento de Wompi (modelo o payload JSON ya decodificado)
        event_key: Secreto de eventos del comercio

    Returns:
        Checksum hexadecimal
    """
    _require_str("event_key", event_key)
    parsed = parse_event(event)
    transaction = parsed.data.transaction

    return hash_value(
        f"{transaction.id}{transaction.status}{transaction.amount_in_cents}"
        f"{parsed.timestamp}{event_key}"
    )


def validate_checksum(
    event: TransactionEvent | Mapping[str, Any],
    event_key: str,
) -> bool:
    """
    Valida el checksum de un evento contra el secreto de eventos.

    Necesario para asegurar que el evento proviene de Wompi y no fue
    manipulado.

    Args:
        event: Evento de Wompi (modelo o payload JSON ya decodificado)
        event_key: Secreto de eventos del comercio

    Returns:
        True si el checksum es válido

    Raises:
        MalformedEventError: Si el evento no tiene la estructura esperada
        InvalidArgumentError: Si el secreto no es un string
    """
    parsed = parse_event(event)
    expected = build_event_checksum(parsed, event_key)
    received = parsed.signature.checksum

    is_valid = hmac.compare_digest(expected.encode("utf-8"), received.encode("utf-8"))

    logger.debug(
        "Checksum verification",
        event_type=parsed.event,
        transaction_id=parsed.data.transaction.id,
        environment=parsed.environment,
        match=is_valid,
    )

    if not is_valid:
        logger.warning(
            "Event checksum mismatch",
            event_type=parsed.event,
            transaction_id=parsed.data.transaction.id,
        )

    return is_valid

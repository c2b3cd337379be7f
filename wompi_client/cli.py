"""
Utilidades de línea de comandos para firmas, eventos y consultas a Wompi.

Uso:
    python -m wompi_client checkout-url --reference order-1 --amount-in-cents 10000 --currency COP
    python -m wompi_client integrity-signature --reference order-1 --amount-in-cents 10000 --currency COP
    python -m wompi_client verify-event evento.json
    python -m wompi_client transaction-status 1234-1610641025-49201
"""

import argparse
import asyncio
import json
import sys

import structlog

from wompi_client.adapters.http_client import create_client
from wompi_client.config import Settings, get_settings
from wompi_client.logging_config import configure_logging
from wompi_client.schemas.checkout import CheckoutRequest
from wompi_client.schemas.client import CheckoutConfig
from wompi_client.services.checkout_service import build_checkout_url
from wompi_client.services.transaction_service import get_transaction_status
from wompi_client.utils.exceptions import WompiError
from wompi_client.utils.signatures import build_integrity_signature, validate_checksum


logger = structlog.get_logger(__name__)


def _add_transaction_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--reference", required=True)
    parser.add_argument("--amount-in-cents", type=int, required=True)
    parser.add_argument("--currency", required=True)
    parser.add_argument("--expiration-date")
    parser.add_argument("--integrity-secret", help="Usa WOMPI_INTEGRITY_SECRET si no se indica")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wompi_client", description="Firmas y URLs de Wompi")
    subparsers = parser.add_subparsers(dest="command", required=True)

    checkout = subparsers.add_parser("checkout-url", help="Imprime una URL del Web Checkout")
    _add_transaction_arguments(checkout)
    checkout.add_argument("--redirect-url")
    checkout.add_argument("--public-key", help="Usa WOMPI_PUBLIC_KEY si no se indica")

    signature = subparsers.add_parser("integrity-signature", help="Imprime la firma de integridad")
    _add_transaction_arguments(signature)

    verify = subparsers.add_parser("verify-event", help="Valida el checksum de un evento en JSON")
    verify.add_argument("file", help="Archivo JSON con el evento ('-' para stdin)")
    verify.add_argument("--event-key", help="Usa WOMPI_EVENT_KEY si no se indica")

    status = subparsers.add_parser("transaction-status", help="Consulta el estado de una transacción")
    status.add_argument("transaction_id")

    return parser


def _read_event(path: str) -> dict:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


async def _transaction_status(settings: Settings, transaction_id: str) -> int:
    async with create_client(
        settings.client_config(),
        timeout=settings.WOMPI_TIMEOUT_SECONDS,
    ) as client:
        result = await get_transaction_status(client, transaction_id)

    print(json.dumps(result.to_dict(), default=str, indent=2, ensure_ascii=False))
    return 0 if result.ok else 1


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada. Retorna el código de salida."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)

        if args.command == "verify-event":
            event_key = args.event_key or settings.WOMPI_EVENT_KEY
            is_valid = validate_checksum(_read_event(args.file), event_key)
            print("valid" if is_valid else "invalid")
            return 0 if is_valid else 1

        if args.command == "transaction-status":
            return asyncio.run(_transaction_status(settings, args.transaction_id))

        integrity_secret = args.integrity_secret or settings.WOMPI_INTEGRITY_SECRET

        if args.command == "integrity-signature":
            print(build_integrity_signature(
                reference=args.reference,
                amount_in_cents=args.amount_in_cents,
                currency=args.currency,
                integrity_secret=integrity_secret,
                expiration_date=args.expiration_date,
            ))
            return 0

        config = CheckoutConfig(
            base_url=settings.WOMPI_CHECKOUT_URL,
            public_key=args.public_key or settings.WOMPI_PUBLIC_KEY,
        )
        print(build_checkout_url(config, CheckoutRequest(
            reference=args.reference,
            amount_in_cents=args.amount_in_cents,
            currency=args.currency,
            integrity_secret=integrity_secret,
            expiration_date=args.expiration_date,
            redirect_url=args.redirect_url,
        )))
        return 0

    except (WompiError, ValueError, OSError) as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2

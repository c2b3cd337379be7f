"""
Endpoint para recibir eventos (webhooks) de Wompi.

Requiere el extra `fastapi`:

    pip install "wompi-client[fastapi]"
"""

from typing import Awaitable, Callable

import structlog
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import ValidationError

from wompi_client.schemas.event import TransactionEvent
from wompi_client.utils.signatures import validate_checksum


logger = structlog.get_logger(__name__)

EventHandler = Callable[[TransactionEvent], Awaitable[None]]


def create_events_router(
    event_key: str,
    on_event: EventHandler | None = None,
) -> APIRouter:
    """
    Crea un router con el endpoint `POST /events`.

    - Valida el checksum del evento con el secreto de eventos
    - Si es válido, ejecuta `on_event` con el evento ya parseado

    Args:
        event_key: Secreto de eventos del comercio
        on_event: Callback async opcional para procesar el evento

    Returns:
        APIRouter listo para `app.include_router(...)`
    """
    router = APIRouter()

    @router.post(
        "/events",
        status_code=status.HTTP_200_OK,
        summary="Evento de Wompi",
        description="""
        Endpoint para recibir eventos de Wompi (ej: `transaction.updated`).

        - Valida `signature.checksum` usando el secreto de eventos
        - Responde 401 si el checksum no coincide

        **Importante**: La URL de este endpoint debe configurarse en el dashboard de Wompi.
        """,
    )
    async def wompi_event(request: Request):
        """Procesa un evento de Wompi."""
        try:
            payload = await request.json()
        except ValueError:
            logger.warning("Invalid JSON payload in Wompi event")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid JSON payload",
            )

        try:
            event = TransactionEvent.model_validate(payload)
        except ValidationError as e:
            logger.warning("Malformed Wompi event", errors=e.error_count())
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Malformed event payload",
            )

        if not validate_checksum(event, event_key):
            logger.warning(
                "Wompi event verification failed",
                event_type=event.event,
                transaction_id=event.transaction.id,
            )
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Webhook verification failed",
            )

        if on_event is not None:
            try:
                await on_event(event)
            except Exception as e:
                logger.error(
                    "Wompi event processing error",
                    event_type=event.event,
                    transaction_id=event.transaction.id,
                    error=str(e),
                )
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail="Failed to process event",
                )

        logger.info(
            "Wompi event processed",
            event_type=event.event,
            transaction_id=event.transaction.id,
            transaction_status=event.transaction.status,
        )

        return {
            "received": True,
            "event": event.event,
            "transaction_id": event.transaction.id,
        }

    return router

"""
Schemas para eventos (webhooks) enviados por Wompi.

Los nombres de campo son los del payload de Wompi (snake_case) y se leen
sin renombrar.
"""

from typing import Any, Literal

from pydantic import Field

from wompi_client.schemas.common import BaseSchema, GatewaySchema


class EventTransaction(GatewaySchema):
    """Transacción incluida en `data.transaction`."""
    
    id: str
    status: str
    amount_in_cents: int
    reference: str | None = None
    currency: str | None = None
    customer_email: str | None = None
    payment_method_type: str | None = None
    redirect_url: str | None = None
    shipping_address: dict[str, Any] | None = None
    payment_link_id: str | None = None
    payment_source_id: int | str | None = None


class EventData(GatewaySchema):
    """Contenedor `data` del evento."""
    
    transaction: EventTransaction


class EventSignature(BaseSchema):
    """Bloque `signature` del evento."""
    
    properties: list[str] = Field(default_factory=list)
    checksum: str


class TransactionEvent(GatewaySchema):
    """Evento de transacción (ej: `transaction.updated`)."""
    
    event: str
    data: EventData
    signature: EventSignature
    timestamp: int = Field(..., description="Unix timestamp del evento")
    environment: Literal["prod", "test"]
    sent_at: str | None = None
    
    @property
    def transaction(self) -> EventTransaction:
        return self.data.transaction

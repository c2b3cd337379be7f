"""
Schemas para la construcción de URLs de pago.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from wompi_client.schemas.common import BaseSchema


class CheckoutRequest(BaseSchema):
    """
    Datos de una transacción para redirigir al Web Checkout.
    
    El `integrity_secret` solo se usa para calcular la firma; nunca se
    incluye en la URL.
    """
    
    reference: str = Field(..., description="Referencia única de la transacción")
    amount_in_cents: int = Field(..., ge=0, strict=True, description="Monto en centavos")
    currency: str = Field(..., pattern=r"^[A-Z]{3}$", description="Código ISO 4217 (COP, USD)")
    integrity_secret: str = Field(..., repr=False, description="Secreto de integridad")
    
    # Opcionales
    expiration_date: str | None = Field(None, description="Fecha de expiración ISO 8601")
    redirect_url: str | None = Field(None, description="URL de redirección tras el pago")
    
    @field_validator("expiration_date", mode="before")
    @classmethod
    def format_expiration_date(cls, value):
        """Convierte un datetime al formato ISO 8601 en UTC con milisegundos."""
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            value = value.astimezone(timezone.utc)
            return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
        return value

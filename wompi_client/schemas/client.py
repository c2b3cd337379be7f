"""
Configuración de conexión para la API de Wompi.
"""

from pydantic import Field

from wompi_client.schemas.common import BaseSchema


class ClientConfig(BaseSchema):
    """Datos para construir un cliente HTTP autenticado contra la API."""
    
    base_url: str = Field(..., description="URL base de la API (ej: https://production.wompi.co/v1)")
    private_key: str = Field(..., repr=False, description="Llave privada, enviada como Bearer token")


class CheckoutConfig(BaseSchema):
    """Datos para construir URLs del Web Checkout."""
    
    base_url: str = Field(..., description="URL base del checkout (ej: https://checkout.wompi.co/p)")
    public_key: str = Field(..., description="Llave pública del comercio")

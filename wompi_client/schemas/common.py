"""
Schemas comunes y base para reutilización.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Schema base inmutable.
    
    Los valores se conservan tal cual llegan: cualquier normalización
    (por ejemplo, recortar espacios) alteraría las firmas calculadas.
    """
    
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )


class GatewaySchema(BaseSchema):
    """Schema para payloads de Wompi que conserva los campos no modelados."""
    
    model_config = ConfigDict(extra="allow")

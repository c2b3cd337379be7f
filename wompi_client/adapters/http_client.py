"""
Cliente HTTP para la API de Wompi.

Reintentos, pool de conexiones, TLS y timeouts quedan a cargo de httpx.
"""

import httpx
import structlog

from wompi_client.schemas.client import ClientConfig


logger = structlog.get_logger(__name__)


def build_headers(private_key: str) -> dict[str, str]:
    """Headers por defecto de todas las peticiones autenticadas."""
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {private_key}",
    }


def create_client(
    config: ClientConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | httpx.Timeout | None = None,
) -> httpx.AsyncClient:
    """
    Crea un cliente reutilizable para la API de Wompi.
    
    No realiza ninguna petición al crearse. El cliente puede compartirse
    entre tareas concurrentes; quien lo crea es responsable de cerrarlo
    (`async with` o `await client.aclose()`).
    
    Args:
        config: URL base y llave privada
        transport: Transport de httpx alternativo (útil para testing)
        timeout: Timeout de httpx (usa el de httpx si no se proporciona)
        
    Returns:
        httpx.AsyncClient configurado
    """
    kwargs = {}
    if timeout is not None:
        kwargs["timeout"] = timeout
    
    client = httpx.AsyncClient(
        base_url=config.base_url,
        headers=build_headers(config.private_key),
        transport=transport,
        **kwargs,
    )
    
    logger.debug("Wompi client created", base_url=config.base_url)
    
    return client

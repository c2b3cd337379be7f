"""
Consulta del estado de transacciones en la API de Wompi.
"""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from wompi_client.adapters.base import (
    GatewayError,
    TransactionFound,
    TransactionResult,
    TransportError,
    UnknownError,
)


logger = structlog.get_logger(__name__)

CONNECTION_ERROR_MESSAGE = (
    "An error occurred while connecting to Wompi. Check that the client is "
    "correctly configured or try again later."
)


def _decode_body(response: httpx.Response) -> Any:
    """Retorna el JSON de la respuesta, o el texto si no es JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text


async def transaction_request(client: httpx.AsyncClient, endpoint: str) -> TransactionResult:
    """
    Realiza un GET a la API de Wompi y normaliza el resultado.
    
    Nunca lanza excepciones por fallos de transporte; no reintenta.
    
    Args:
        client: Cliente creado con `create_client`
        endpoint: Endpoint relativo a la URL base
        
    Returns:
        TransactionFound, GatewayError, TransportError o UnknownError
    """
    try:
        response = await client.get(endpoint)
        response.raise_for_status()
        
        return TransactionFound(payload=_decode_body(response))
        
    except httpx.HTTPStatusError as e:
        logger.warning(
            "Wompi responded with an error",
            endpoint=endpoint,
            status_code=e.response.status_code,
        )
        return GatewayError(
            body=_decode_body(e.response),
            status_code=e.response.status_code,
        )
        
    except (httpx.UnsupportedProtocol, httpx.InvalidURL) as e:
        logger.error("Wompi client misconfigured", endpoint=endpoint, error=str(e))
        
    except httpx.RequestError as e:
        try:
            request = e.request
        except RuntimeError:
            logger.error("Wompi request failed before sending", endpoint=endpoint, error=str(e))
        else:
            logger.error(
                "No response from Wompi",
                endpoint=endpoint,
                error_type=type(e).__name__,
                error=str(e),
            )
            return TransportError(request=request, message=str(e))
        
    except Exception as e:
        logger.error("Unexpected error querying Wompi", endpoint=endpoint, error=str(e))
    
    return UnknownError(message=CONNECTION_ERROR_MESSAGE)


async def get_transaction_status(
    client: httpx.AsyncClient,
    transaction_id: str,
) -> TransactionResult:
    """
    Consulta el estado de una transacción usando su ID.
    
    Args:
        client: Cliente creado con `create_client`
        transaction_id: ID de la transacción en Wompi
        
    Returns:
        Resultado normalizado de la consulta
        
    Example:
        >>> async with create_client(config) as client:
        ...     result = await get_transaction_status(client, "1234-1610641025-49201")
        ...     if result.ok:
        ...         print(result.payload["data"]["status"])
    """
    return await transaction_request(client, f"/transactions/{quote(transaction_id, safe='')}")


async def check_transaction_status_by_id(
    client: httpx.AsyncClient,
    transaction_id: str,
) -> Any:
    """
    Igual que `get_transaction_status`, pero retorna el payload de Wompi
    tal cual o un dict `{"error": ...}`.
    """
    result = await get_transaction_status(client, transaction_id)
    return result.to_dict()

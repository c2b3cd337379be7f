"""
Construcción de URLs para el Web Checkout de Wompi.
"""

from typing import Any, Mapping
from urllib.parse import quote_plus, urlencode

import structlog

from wompi_client.schemas.checkout import CheckoutRequest
from wompi_client.schemas.client import CheckoutConfig
from wompi_client.utils.signatures import build_integrity_signature


logger = structlog.get_logger(__name__)


def _quote_form(value: str, safe: str = "", encoding=None, errors=None) -> str:
    # application/x-www-form-urlencoded: "*" sin escapar, "~" como %7E
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def build_checkout_url(
    config: CheckoutConfig,
    request: CheckoutRequest | Mapping[str, Any],
) -> str:
    """
    Construye la URL de Wompi para redirigir al usuario a la página de pago.
    
    Los nombres y el orden de los parámetros son los que exige el Web
    Checkout: public-key, reference, amount-in-cents, currency,
    signature:integrity y, si existen, expiration-date y redirect-url.
    
    Args:
        config: URL base del checkout y llave pública
        request: Datos de la transacción
        
    Returns:
        URL completa del checkout
        
    Raises:
        pydantic.ValidationError: Si `request` es un dict inválido
        
    Example:
        >>> build_checkout_url(
        ...     CheckoutConfig(base_url="https://checkout.wompi.co/p", public_key="pub_test_123"),
        ...     CheckoutRequest(
        ...         reference="order-1",
        ...         amount_in_cents=10000,
        ...         currency="COP",
        ...         integrity_secret="test_integrity_123",
        ...     ),
        ... )
        'https://checkout.wompi.co/p/?public-key=pub_test_123&reference=order-1&amount-in-cents=10000&currency=COP&signature%3Aintegrity=...'
    """
    if not isinstance(request, CheckoutRequest):
        request = CheckoutRequest.model_validate(request)
    
    signature = build_integrity_signature(
        reference=request.reference,
        amount_in_cents=request.amount_in_cents,
        currency=request.currency,
        integrity_secret=request.integrity_secret,
        expiration_date=request.expiration_date,
    )
    
    params = [
        ("public-key", config.public_key),
        ("reference", request.reference),
        ("amount-in-cents", str(request.amount_in_cents)),
        ("currency", request.currency),
        ("signature:integrity", signature),
    ]
    
    if request.expiration_date:
        params.append(("expiration-date", request.expiration_date))
    if request.redirect_url:
        params.append(("redirect-url", request.redirect_url))
    
    logger.debug(
        "Checkout URL built",
        reference=request.reference,
        amount_in_cents=request.amount_in_cents,
        currency=request.currency,
    )
    
    return f"{config.base_url}/?{urlencode(params, quote_via=_quote_form)}"

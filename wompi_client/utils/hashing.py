"""
Hash SHA-256 usado por las firmas de integridad y los checksums de eventos.
"""

import hashlib

from wompi_client.utils.exceptions import InvalidArgumentError


def hash_value(value: str) -> str:
    """
    Convierte un valor a su representación hexadecimal usando SHA-256.
    
    Args:
        value: Texto a hashear (se codifica en UTF-8; los surrogates sueltos
            se reemplazan por U+FFFD)
        
    Returns:
        Hash hexadecimal en minúsculas (64 caracteres)
        
    Raises:
        InvalidArgumentError: Si el valor no es un string
    """
    if not isinstance(value, str):
        raise InvalidArgumentError("value", "str", value)
    
    data = value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    return hashlib.sha256(data.encode("utf-8")).hexdigest()

"""
Excepciones personalizadas del cliente de Wompi.
"""


class WompiError(Exception):
    """Error base del cliente de Wompi."""
    
    def __init__(self, message: str, code: str = "WOMPI_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidArgumentError(WompiError):
    """Argumento inválido para una función de hash o firma."""
    
    def __init__(self, argument: str, expected: str, value: object):
        super().__init__(
            message=f"Invalid argument '{argument}': expected {expected}, got {type(value).__name__}",
            code="INVALID_ARGUMENT",
        )
        self.argument = argument
        self.expected = expected


class MalformedEventError(WompiError):
    """El evento recibido no tiene la estructura esperada."""
    
    def __init__(self, message: str):
        super().__init__(
            message=f"Malformed event: {message}",
            code="MALFORMED_EVENT",
        )

"""
Resultados normalizados de las consultas a la API de Wompi.

Una consulta nunca lanza excepciones por fallos de transporte: siempre
retorna una de estas variantes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

import httpx


class ResultStatus(str, Enum):
    """Tipo de resultado de una consulta."""
    
    SUCCESS = "success"
    GATEWAY_ERROR = "gateway_error"      # Wompi respondió con un status no 2xx
    TRANSPORT_ERROR = "transport_error"  # La petición salió pero no hubo respuesta
    UNKNOWN_ERROR = "unknown_error"      # Configuración inválida u otro fallo


@dataclass(frozen=True)
class TransactionFound:
    """Respuesta 2xx de Wompi, sin transformar."""
    
    status: ClassVar[ResultStatus] = ResultStatus.SUCCESS
    
    payload: Any
    
    @property
    def ok(self) -> bool:
        return True
    
    def to_dict(self) -> Any:
        return self.payload


@dataclass(frozen=True)
class GatewayError:
    """Wompi rechazó la petición (4xx/5xx)."""
    
    status: ClassVar[ResultStatus] = ResultStatus.GATEWAY_ERROR
    
    body: Any
    status_code: int
    
    @property
    def ok(self) -> bool:
        return False
    
    def to_dict(self) -> dict[str, Any]:
        return {"error": self.body}


@dataclass(frozen=True)
class TransportError:
    """La petición fue enviada pero no se recibió respuesta (red, timeout)."""
    
    status: ClassVar[ResultStatus] = ResultStatus.TRANSPORT_ERROR
    
    request: httpx.Request
    message: str = ""
    
    @property
    def ok(self) -> bool:
        return False
    
    def to_dict(self) -> dict[str, Any]:
        return {"error": self.request}


@dataclass(frozen=True)
class UnknownError:
    """Cualquier otro fallo: cliente mal configurado, URL inválida, etc."""
    
    status: ClassVar[ResultStatus] = ResultStatus.UNKNOWN_ERROR
    
    message: str
    
    @property
    def ok(self) -> bool:
        return False
    
    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


TransactionResult = Union[TransactionFound, GatewayError, TransportError, UnknownError]

"""
Configuración del cliente de Wompi.
Carga variables de entorno y define valores por defecto.

Las funciones del cliente no leen esta configuración implícitamente:
reciben ClientConfig/CheckoutConfig explícitos.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

from wompi_client.schemas.client import CheckoutConfig, ClientConfig


class Settings(BaseSettings):
    """Configuración principal del cliente."""
    
    # Aplicación
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: str = "INFO"
    
    # API de Wompi (sandbox por defecto)
    WOMPI_API_URL: str = "https://sandbox.wompi.co/v1"
    WOMPI_CHECKOUT_URL: str = "https://checkout.wompi.co/p"
    WOMPI_TIMEOUT_SECONDS: float = 10.0
    
    # Llaves del comercio
    WOMPI_PUBLIC_KEY: str = ""
    WOMPI_PRIVATE_KEY: str = ""
    
    # Secretos de firma
    WOMPI_INTEGRITY_SECRET: str = ""
    WOMPI_EVENT_KEY: str = ""
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"
    
    def client_config(self) -> ClientConfig:
        """Configuración para `create_client`."""
        return ClientConfig(base_url=self.WOMPI_API_URL, private_key=self.WOMPI_PRIVATE_KEY)
    
    def checkout_config(self) -> CheckoutConfig:
        """Configuración para `build_checkout_url`."""
        return CheckoutConfig(base_url=self.WOMPI_CHECKOUT_URL, public_key=self.WOMPI_PUBLIC_KEY)


@lru_cache()
def get_settings() -> Settings:
    """Retorna instancia cacheada de settings."""
    return Settings()

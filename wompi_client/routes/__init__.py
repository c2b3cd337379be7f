"""
Rutas de FastAPI para recibir eventos de Wompi (extra `fastapi`).
"""

from wompi_client.routes.events import create_events_router

__all__ = ["create_events_router"]

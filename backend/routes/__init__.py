# Routes package
from .templates import router as templates_router

__all__ = ['templates_router']

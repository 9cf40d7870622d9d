from .base import BaseModel, BaseSettings

__all__ = [
    "BaseModel",
    "BaseSettings",
]

import pydantic
import pydantic_settings


class BaseModel(pydantic.BaseModel): ...


class BaseSettings(pydantic_settings.BaseSettings): ...


__all__ = [
    "BaseModel",
    "BaseSettings",
]

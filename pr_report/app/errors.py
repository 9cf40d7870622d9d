import typing


class ApplicationError(Exception):
    def __init__(self, message: str, *args: typing.Any) -> None:
        super().__init__(message, *args)
        self.message = message


class ConfigurationError(ApplicationError):
    pass


class TransportError(ApplicationError):
    pass


class ShapeError(ApplicationError):
    pass


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "ShapeError",
    "TransportError",
]

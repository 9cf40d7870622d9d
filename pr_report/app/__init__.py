from .app import Application, ReportQuery, RunState
from .errors import ApplicationError, ConfigurationError, ShapeError, TransportError
from .settings import AppSettings, Settings

__all__ = [
    "Application",
    "AppSettings",
    "ApplicationError",
    "ConfigurationError",
    "ReportQuery",
    "RunState",
    "Settings",
    "ShapeError",
    "TransportError",
]

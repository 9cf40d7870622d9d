import dataclasses
import logging.config
import typing

LogLevel = typing.Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


@dataclasses.dataclass(frozen=True)
class LoggerConfig:
    propagate: bool = True
    level: LogLevel = "INFO"
    handlers: tuple[str, ...] = ()


def create_config(
    log_level: LogLevel,
    log_format: str,
    loggers: dict[str, LoggerConfig] | None = None,
) -> dict[str, typing.Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "()": "pr_report.utils.logging.formatters.SecretMaskingFormatter",
                "format": log_format,
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            name: {
                "handlers": list(logger_config.handlers),
                "level": logger_config.level,
                "propagate": logger_config.propagate,
            }
            for name, logger_config in (loggers or {}).items()
        },
        "root": {
            "handlers": ["stderr"],
            "level": log_level,
        },
    }


def initialize(config: dict[str, typing.Any]) -> None:
    logging.config.dictConfig(config)


__all__ = [
    "LogLevel",
    "LoggerConfig",
    "create_config",
    "initialize",
]

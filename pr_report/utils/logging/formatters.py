import logging

_SECRETS: dict[str, str] = {}  # secret value: name shown instead


def register_secret(value: str, name: str) -> None:
    if value == "":
        return

    _SECRETS[value] = name


def clear_secrets() -> None:
    _SECRETS.clear()


class SecretMaskingFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        for value, name in _SECRETS.items():
            message = message.replace(value, f"***{name}***")

        return message


__all__ = [
    "SecretMaskingFormatter",
    "clear_secrets",
    "register_secret",
]

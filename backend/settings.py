import os

# Basic settings helper to read environment configuration.

DEFAULT_PORT = 8080


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_port(val: str | None, default: int = DEFAULT_PORT) -> int:
    if not val:
        return default
    try:
        port = int(val)
    except ValueError:
        raise ValueError(f"PORT must be numeric, got {val!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


class Settings:
    def __init__(self) -> None:
        self.PORT: int = _as_port(os.getenv("PORT"))
        self.HOST: str = os.getenv("HOST") or "0.0.0.0"
        self.LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").upper()
        self.RELOAD: bool = _as_bool(os.getenv("RELOAD"), False)

from os import getenv


def _flag(value: str) -> bool:
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./taskboard.db")
    STORAGE_KEY = getenv("STORAGE_KEY", "taskboard-app-data")  # une seule clé pour tout l'état
    COMPACT_ORDERS = _flag(getenv("COMPACT_ORDERS", "true"))
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

settings = Settings()

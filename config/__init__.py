import os

def get_settings_module() -> str:
    # APP_ENV selects the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def parse_weekdays(value: str) -> tuple:
    """'5,6' -> (5, 6). Python weekday numbers, Monday == 0."""
    return tuple(int(part) for part in value.split(",") if part.strip())

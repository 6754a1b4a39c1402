import os


def get_settings_module() -> str:
    # Settings module is picked from APP_ENV, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "smartattend.config.production"

    if env in {"test", "testing"}:
        return "smartattend.config.testing"

    return "smartattend.config.development"

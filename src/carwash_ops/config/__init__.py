import os


def get_settings_module() -> str:
    # Settings module is picked from APP_ENV, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "carwash_ops.config.production"

    if env in {"test", "testing"}:
        return "carwash_ops.config.testing"

    return "carwash_ops.config.development"

import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "shop_payroll.settings.production"

    if env in {"test", "testing"}:
        return "shop_payroll.settings.testing"

    return "shop_payroll.settings.development"

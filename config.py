import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./fieldservice.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    AUTH_DISABLED = bool(data.get("AUTH_DISABLED", False))
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", True))

    # Invoicing
    DEFAULT_TAX_RATE = str(data.get("DEFAULT_TAX_RATE", "0.08"))  # Fraction, e.g. 0.08 = 8%
    INVOICE_DUE_DAYS = data.get("INVOICE_DUE_DAYS", 30)
    COMPANY_NAME = data.get("COMPANY_NAME", "HandimanApp")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "")
    INVOICE_NOTIFICATION_WEBHOOK = data.get("INVOICE_NOTIFICATION_WEBHOOK", None)

    # Job costing
    FALLBACK_MARKUP = str(data.get("FALLBACK_MARKUP", "1.35"))  # Revenue estimate when no invoice exists

    # Overdue invoice detection
    OVERDUE_DETECTION_ENABLED = bool(data.get("OVERDUE_DETECTION_ENABLED", True))
    OVERDUE_CHECK_INTERVAL_SECONDS = data.get("OVERDUE_CHECK_INTERVAL_SECONDS", 3600)  # Hourly

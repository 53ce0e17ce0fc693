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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./cardvault.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = data.get("API_RELOAD", False)
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Collections and profile
    STORAGE_KEY_PREFIX = data.get("STORAGE_KEY_PREFIX", "@cardvault")
    DEFAULT_CURRENCY = data.get("DEFAULT_CURRENCY", "INR")
    REPORT_DEFAULT_NAME = data.get("REPORT_DEFAULT_NAME", "CardVault")

    # Business card field extraction
    OPENAI_API_KEY = data.get("OPENAI_API_KEY", os.environ.get("OPENAI_API_KEY", ""))
    OPENAI_MODEL = data.get("OPENAI_MODEL", "gpt-4o")
    EXTRACTION_MAX_TOKENS = data.get("EXTRACTION_MAX_TOKENS", 500)
    EXTRACTION_TIMEOUT_SECONDS = data.get("EXTRACTION_TIMEOUT_SECONDS", 60.0)

    # Pending payment reminders
    NOTIFICATIONS_ENABLED = bool(data.get("NOTIFICATIONS_ENABLED", False))
    NOTIFICATION_WEBHOOK = data.get("NOTIFICATION_WEBHOOK", None)
    PENDING_REMINDER_LIMIT = data.get("PENDING_REMINDER_LIMIT", 3)
    PENDING_REMINDER_GRACE_DAYS = data.get("PENDING_REMINDER_GRACE_DAYS", 30)
    PENDING_REMINDER_INTERVAL_SECONDS = data.get("PENDING_REMINDER_INTERVAL_SECONDS", 86400)  # Daily

    # Ledger reconciliation
    RECONCILIATION_ENABLED = bool(data.get("RECONCILIATION_ENABLED", True))
    RECONCILIATION_INTERVAL_SECONDS = data.get("RECONCILIATION_INTERVAL_SECONDS", 86400)  # Daily

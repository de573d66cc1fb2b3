from pathlib import Path

TELEGRAM_API_URL_TEMPLATE = "https://api.telegram.org/bot{token}/sendMessage"

CONFIG_ENV_VAR = "TG_SEND_CONFIG"
CONFIG_DIR_NAME = "tg-send"
CONFIG_FILE_NAME = "config.ini"

SYSTEM_CONFIG_PATH = Path("/etc") / CONFIG_DIR_NAME / CONFIG_FILE_NAME

BOTS_SECTION = "bots"
CHATS_SECTION = "chats"
DEFAULTS_SECTION = "defaults"

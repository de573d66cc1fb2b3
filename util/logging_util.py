import logging
import sys
# Configure logging format
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Names of every logger handed out by setup_logger
_CONFIGURED_LOGGERS: set[str] = set()


def setup_logger(name: str, level=logging.INFO, stream=None) -> logging.Logger:
    """
    Sets up a logger with consistent formatting.

    Args:
        name: Name of the logger (typically __name__ from the calling module)
        level: Logging level (default: INFO)
        stream: Stream for the console handler (default: stderr, so that
            stdout only ever carries usage text)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if not logger.handlers:
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)
        logger.propagate = False

    _CONFIGURED_LOGGERS.add(name)
    return logger


def set_level(level) -> None:
    """
    Changes the level of every logger created through setup_logger.
    Used by --quiet to silence the informational output.
    """
    for name in _CONFIGURED_LOGGERS:
        logging.getLogger(name).setLevel(level)


def log_telegram_message_sent(logger: logging.Logger, bot_name: str, chat_name: str,
                              text: str):
    """
    Logs an outgoing Telegram message. The bot token is never logged.

    Args:
        logger: Logger instance to use
        bot_name: Alias of the sending bot
        chat_name: Alias of the destination chat
        text: Message text
    """
    logger.info(f"📤 Telegram Message Sent - Bot: {bot_name}, Chat: {chat_name}")
    logger.debug(f"  Text: {text[:200]}{'...' if len(text) > 200 else ''}")

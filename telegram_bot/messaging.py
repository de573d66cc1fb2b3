from dataclasses import dataclass
from enum import Enum

import requests

from telegram_bot.config_store import Bot, Chat
from telegram_bot.errors import (
    ApiError,
    BadResponseError,
    EmptyMessageError,
    FormatConflictError,
    NetworkError,
)
from util.constants import TELEGRAM_API_URL_TEMPLATE
from util.logging_util import log_telegram_message_sent, setup_logger

logger = setup_logger(__name__)


class ParseMode(Enum):
    PLAIN = None
    HTML = "HTML"
    MARKDOWN = "Markdown"


@dataclass(frozen=True)
class Message:
    text: str
    parse_mode: ParseMode = ParseMode.PLAIN
    silent: bool = False


def build_message(
    text: str, html: bool = False, markdown: bool = False, silent: bool = False
) -> Message:
    """
    Combines the raw text with the formatting flags.
    HTML and Markdown can't both be requested.
    """
    if html and markdown:
        raise FormatConflictError()

    if not text or not text.strip():
        raise EmptyMessageError()

    if html:
        parse_mode = ParseMode.HTML
    elif markdown:
        parse_mode = ParseMode.MARKDOWN
    else:
        parse_mode = ParseMode.PLAIN

    return Message(text=text, parse_mode=parse_mode, silent=silent)


def get_telegram_api_url(bot: Bot) -> str:
    return TELEGRAM_API_URL_TEMPLATE.format(token=bot.token)


def build_send_params(chat: Chat, message: Message) -> dict:
    """
    Query parameters for a sendMessage request
    """
    params = {"chat_id": chat.chat_id, "text": message.text}
    if message.silent:
        params["disable_notification"] = 1
    if message.parse_mode is not ParseMode.PLAIN:
        params["parse_mode"] = message.parse_mode.value
    return params


def send_message(bot: Bot, chat: Chat, message: Message) -> dict:
    """
    Sends a message to the given chat from the given bot.

    Args:
        bot: The resolved bot, whose token goes in the URL
        chat: The resolved destination chat
        message: The message to send

    Returns:
        The `result` object of the API response (the sent message)

    Raises:
        NetworkError: the request couldn't be made
        BadResponseError: the response body isn't a JSON object
        ApiError: the API answered without a truthy `ok`
    """
    logger.info(f"Sending message to chat '{chat.name}' via bot '{bot.name}'")

    try:
        resp = requests.get(
            get_telegram_api_url(bot),
            params=build_send_params(chat, message),
        )
    except requests.RequestException as e:
        # the exception text can contain the url, and so the token
        logger.error(f"Request to the Telegram API failed: {type(e).__name__}")
        raise NetworkError(f"failed to reach the Telegram API: {type(e).__name__}") from e

    try:
        resp_json = resp.json()
    except ValueError as e:
        raise BadResponseError(
            f"malformed response from the Telegram API (HTTP {resp.status_code})"
        ) from e

    if not isinstance(resp_json, dict):
        raise BadResponseError(
            f"unexpected response from the Telegram API (HTTP {resp.status_code})"
        )

    if not resp_json.get("ok"):
        description = resp_json.get("description") or "request was not successful"
        logger.error(f"Telegram API refused the message: {description}")
        raise ApiError(description, resp_json.get("error_code"))

    log_telegram_message_sent(logger, bot.name, chat.name, message.text)
    return resp_json.get("result") or {}

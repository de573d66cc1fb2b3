"""Tests for message formatting and the sendMessage transport."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from telegram_bot.config_store import Bot, Chat
from telegram_bot.errors import (
    ApiError,
    BadResponseError,
    EmptyMessageError,
    FormatConflictError,
    NetworkError,
    ValidationError,
)
from telegram_bot.messaging import (
    Message,
    ParseMode,
    build_message,
    build_send_params,
    get_telegram_api_url,
    send_message,
)

BOT = Bot(token="111:AAA", name="alerts")
CHAT = Chat(chat_id="12345", name="me")


def _response(json_data=None, status_code=200, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    return resp


class TestBuildMessage:
    def test_plain(self):
        msg = build_message("hello")
        assert msg == Message(text="hello", parse_mode=ParseMode.PLAIN, silent=False)

    def test_html(self):
        assert build_message("<b>hi</b>", html=True).parse_mode is ParseMode.HTML

    def test_markdown(self):
        assert build_message("*hi*", markdown=True).parse_mode is ParseMode.MARKDOWN

    def test_silent_passed_through(self):
        assert build_message("hello", silent=True).silent is True

    def test_html_and_markdown_conflict(self):
        with pytest.raises(FormatConflictError):
            build_message("hello", html=True, markdown=True)

    def test_conflict_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            build_message("hello", html=True, markdown=True)

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty_text(self, text):
        with pytest.raises(EmptyMessageError):
            build_message(text)


class TestBuildSendParams:
    def test_plain_message(self):
        params = build_send_params(CHAT, build_message("hello"))
        assert params == {"chat_id": "12345", "text": "hello"}

    def test_silent_markdown(self):
        params = build_send_params(CHAT, build_message("hello", markdown=True, silent=True))
        assert params == {
            "chat_id": "12345",
            "text": "hello",
            "disable_notification": 1,
            "parse_mode": "Markdown",
        }

    def test_html(self):
        params = build_send_params(CHAT, build_message("hello", html=True))
        assert params["parse_mode"] == "HTML"
        assert "disable_notification" not in params


class TestGetTelegramApiUrl:
    def test_token_in_url(self):
        assert get_telegram_api_url(BOT) == "https://api.telegram.org/bot111:AAA/sendMessage"


class TestSendMessage:
    @patch("telegram_bot.messaging.requests.get")
    def test_success_returns_result(self, mock_get):
        mock_get.return_value = _response({"ok": True, "result": {"message_id": 7}})
        result = send_message(BOT, CHAT, build_message("hello", markdown=True, silent=True))

        assert result == {"message_id": 7}
        mock_get.assert_called_once_with(
            "https://api.telegram.org/bot111:AAA/sendMessage",
            params={
                "chat_id": "12345",
                "text": "hello",
                "disable_notification": 1,
                "parse_mode": "Markdown",
            },
        )

    @patch("telegram_bot.messaging.requests.get")
    def test_network_failure(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("boom 111:AAA")
        with pytest.raises(NetworkError) as exc_info:
            send_message(BOT, CHAT, build_message("hello"))
        assert "111:AAA" not in str(exc_info.value)

    @patch("telegram_bot.messaging.requests.get")
    def test_malformed_body(self, mock_get):
        mock_get.return_value = _response(json_error=ValueError("no json"), status_code=502)
        with pytest.raises(BadResponseError) as exc_info:
            send_message(BOT, CHAT, build_message("hello"))
        assert "502" in str(exc_info.value)

    @patch("telegram_bot.messaging.requests.get")
    def test_body_not_an_object(self, mock_get):
        mock_get.return_value = _response(["ok"])
        with pytest.raises(BadResponseError):
            send_message(BOT, CHAT, build_message("hello"))

    @patch("telegram_bot.messaging.requests.get")
    def test_api_failure(self, mock_get):
        mock_get.return_value = _response(
            {"ok": False, "error_code": 400, "description": "Bad Request: chat not found"},
            status_code=400,
        )
        with pytest.raises(ApiError) as exc_info:
            send_message(BOT, CHAT, build_message("hello"))
        assert exc_info.value.error_code == 400
        assert "chat not found" in str(exc_info.value)

    @patch("telegram_bot.messaging.requests.get")
    def test_missing_ok_is_failure_even_with_http_200(self, mock_get):
        mock_get.return_value = _response({"result": {"message_id": 7}}, status_code=200)
        with pytest.raises(ApiError) as exc_info:
            send_message(BOT, CHAT, build_message("hello"))
        assert exc_info.value.error_code is None

    @patch("telegram_bot.messaging.requests.get")
    def test_failure_errors_are_distinct(self, mock_get):
        mock_get.side_effect = requests.Timeout()
        with pytest.raises(NetworkError) as network:
            send_message(BOT, CHAT, build_message("hello"))

        mock_get.side_effect = None
        mock_get.return_value = _response(json_error=ValueError())
        with pytest.raises(BadResponseError) as bad:
            send_message(BOT, CHAT, build_message("hello"))

        mock_get.return_value = _response({"ok": False})
        with pytest.raises(ApiError) as api:
            send_message(BOT, CHAT, build_message("hello"))

        messages = {str(network.value), str(bad.value), str(api.value)}
        assert len(messages) == 3

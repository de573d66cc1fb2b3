#!/usr/bin/env python3
"""
Entrypoint for sending Telegram notifications.

Usage:
    tg-send --msg "Your message here"
    echo "Your message here" | tg-send --chat me --silent

Or import and use programmatically:
    from send_notification import notify
    notify("Task completed!")
"""
import argparse
import logging
import sys
from typing import Optional

from telegram_bot.config_store import ConfigStore, find_config_path
from telegram_bot.errors import EmptyMessageError, TelegramSendError
from telegram_bot.messaging import build_message, send_message
from util.logging_util import set_level
from util.stdin import read_stdin


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tg-send",
        description="Send a message to a Telegram chat. "
        "The message is read from --msg, or from standard input when piped.",
    )
    parser.add_argument(
        "--bot",
        metavar="ALIAS",
        help="Bot alias from the [bots] section (default: [defaults] bot)"
    )
    parser.add_argument(
        "--chat",
        metavar="ALIAS",
        help="Chat alias from the [chats] section (default: [defaults] chat)"
    )
    parser.add_argument(
        "--msg",
        metavar="TEXT",
        help="The message to send"
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Config file (default: $TG_SEND_CONFIG, "
        "~/.config/tg-send/config.ini, then /etc/tg-send/config.ini)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print errors"
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Deliver the message without a notification sound"
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Format the message as HTML"
    )
    parser.add_argument(
        "--md",
        action="store_true",
        help="Format the message as Markdown"
    )
    return parser


def notify(
    message: str,
    bot: Optional[str] = None,
    chat: Optional[str] = None,
    config: Optional[str] = None,
    html: bool = False,
    markdown: bool = False,
    silent: bool = False,
) -> dict:
    """Send a notification message via Telegram."""
    outgoing = build_message(message, html=html, markdown=markdown, silent=silent)

    store = ConfigStore(find_config_path(config))
    resolved_bot = store.resolve_bot(bot)
    resolved_chat = store.resolve_chat(chat)

    return send_message(resolved_bot, resolved_chat, outgoing)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.quiet:
        set_level(logging.WARNING)

    text = args.msg if args.msg is not None else read_stdin()

    try:
        notify(
            text,
            bot=args.bot,
            chat=args.chat,
            config=args.config,
            html=args.html,
            markdown=args.md,
            silent=args.silent,
        )
    except EmptyMessageError:
        parser.print_help(sys.stdout)
        return 1
    except TelegramSendError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

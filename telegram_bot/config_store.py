"""
Loading of the INI configuration file and resolution of bot/chat aliases.
"""

import configparser
import os
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Mapping, Optional

from telegram_bot.errors import ConfigError, ConfigFileNotFoundError, ConfigKeyError
from util.constants import (
    BOTS_SECTION,
    CHATS_SECTION,
    CONFIG_DIR_NAME,
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
    DEFAULTS_SECTION,
    SYSTEM_CONFIG_PATH,
)
from util.logging_util import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Bot:
    token: str
    name: str


@dataclass(frozen=True)
class Chat:
    chat_id: str
    name: str


def user_config_path(environ: Mapping[str, str] = os.environ) -> Path:
    """Path of the per-user config file, honouring XDG_CONFIG_HOME."""
    config_home = environ.get("XDG_CONFIG_HOME")
    if config_home:
        base = Path(config_home)
    else:
        base = Path.home() / ".config"
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def find_config_path(
    explicit: Optional[str] = None, environ: Mapping[str, str] = os.environ
) -> Path:
    """
    Works out which config file to load.

    An explicit path (--config) wins, then the TG_SEND_CONFIG environment
    variable. Otherwise the user config directory and then the system-wide
    path are searched; if neither exists the user path is returned so that
    the error message points at the place the file is expected.
    """
    if explicit:
        return Path(explicit).expanduser()

    from_env = environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()

    user_path = user_config_path(environ)
    for candidate in (user_path, SYSTEM_CONFIG_PATH):
        if candidate.is_file():
            return candidate

    return user_path


class ConfigStore:
    """
    Read-only view over a config file of the form

        [bots]
        <alias> = <token>
        [chats]
        <alias> = <chat id>
        [defaults]
        bot = <alias>
        chat = <alias>

    The file is only read the first time a value is requested.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    @cached_property
    def data(self) -> dict[str, dict[str, str]]:
        if not self.path.is_file():
            raise ConfigFileNotFoundError(self.path)

        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # aliases are case sensitive
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                parser.read_file(f)
        except configparser.Error as e:
            raise ConfigError(f"invalid config file {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"cannot read config file {self.path}: {e}") from e

        logger.debug(f"Loaded config from {self.path}")
        return {section: dict(parser[section]) for section in parser.sections()}

    def get(self, *path: str) -> str:
        """Looks up a value by its section/key path."""
        node = self.data
        for depth, segment in enumerate(path):
            if not isinstance(node, dict) or segment not in node:
                raise ConfigKeyError(".".join(path[: depth + 1]))
            node = node[segment]

        if not isinstance(node, str):
            raise ConfigKeyError(".".join(path))
        return node

    def resolve_bot(self, alias: Optional[str] = None) -> Bot:
        if alias is None:
            alias = self.get(DEFAULTS_SECTION, "bot")
        return Bot(token=self.get(BOTS_SECTION, alias), name=alias)

    def resolve_chat(self, alias: Optional[str] = None) -> Chat:
        if alias is None:
            alias = self.get(DEFAULTS_SECTION, "chat")
        return Chat(chat_id=self.get(CHATS_SECTION, alias), name=alias)

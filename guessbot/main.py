"""CLI entry point for the guess bot."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from guessbot.bot import GuessBot
from guessbot.commands import ChatMessage, make_request
from guessbot.config import BotConfig
from guessbot.constants import DEFAULT_PREFIX, GUESS_COMMAND
from guessbot.dictionary import SearchRequest
from guessbot.errors import ConfigError, GuessBotError

logger = logging.getLogger("guessbot")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Guess bot: list the words that can be spelled from a word's letters",
    )
    parser.add_argument("word", nargs="?", help="Pool word whose letters may be used")
    parser.add_argument("word_list", nargs="?", help='Word list name, e.g. "english"')
    parser.add_argument(
        "--min", type=int, default=None, dest="min_length",
        help="Shortest word to list (default: 4 or the configured minimum)",
    )
    parser.add_argument(
        "--max", type=int, default=None, dest="max_length",
        help="Longest word to list (default: length of the pool word)",
    )
    parser.add_argument(
        "--bonus", "-b", type=int, default=None,
        help="Allow up to N letters that are not in the pool word",
    )
    parser.add_argument("--cap", type=int, default=None, help="Message size cap in bytes (default: 500)")
    parser.add_argument("--word-lists", type=Path, default=None, help="Directory holding <name>.txt word lists")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    source.add_argument("--env-file", type=Path, default=None, help=".env file with chat settings")
    parser.add_argument(
        "--console", action="store_true",
        help="Read chat lines from stdin and print the bot's replies",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> BotConfig:
    if args.config is not None:
        config = BotConfig.from_yaml(args.config)
    elif args.env_file is not None:
        config = BotConfig.from_env_file(args.env_file)
    else:
        config = BotConfig()

    if args.word_lists is not None:
        config.search.word_list_dir = args.word_lists
    if args.cap is not None:
        if args.cap < 1:
            raise ConfigError(f"--cap must be positive, got {args.cap}")
        config.search.chunk_cap = args.cap
    return config


def build_request(args: argparse.Namespace, config: BotConfig) -> SearchRequest:
    return make_request(
        args.word,
        args.word_list,
        min_length=args.min_length,
        max_length=args.max_length,
        bonus=args.bonus,
        default_min_length=config.search.min_length,
    )


def console_loop(bot: GuessBot, channel: str = "console", sender: str = "console") -> None:
    """Treat each stdin line as a chat message from a moderator."""
    prefix = bot.config.chat.prefix or DEFAULT_PREFIX
    badges = frozenset(bot.config.chat.privileged_badges)
    print(f"Type {prefix}{GUESS_COMMAND} <word> <list> [min] [max] [bonus], or Ctrl-D to quit.")

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line:
            continue

        try:
            replies = bot.handle_message(ChatMessage(channel, sender, line, badges))
        except GuessBotError as e:
            print(f"Error: {e}")
            continue
        for reply in replies:
            print(reply)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = load_config(args)
    except GuessBotError as e:
        logger.error("Bad configuration: %s", e)
        return 1
    bot = GuessBot(config)

    if args.console:
        console_loop(bot)
        return 0

    if not args.word or not args.word_list:
        print("A pool word and a word list are required (or use --console).", file=sys.stderr)
        return 2

    try:
        request = build_request(args, config)
        messages = bot.guess(request)
    except GuessBotError as e:
        logger.error("%s", e)
        return 1

    for message in messages:
        print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())

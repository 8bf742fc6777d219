"""Guess bot web application: Flask backend."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# Ensure project root is on sys.path so `guessbot.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from guessbot.bot import GuessBot
from guessbot.chunker import chunk, render
from guessbot.commands import ChatMessage, make_request
from guessbot.config import BotConfig
from guessbot.dictionary import DirectoryWordLists, WordListSource
from guessbot.errors import ConfigError, DictionaryNotFound, InvalidRequest

logger = logging.getLogger(__name__)


def _optional_int(data: dict, key: str) -> int | None:
    """Read an optional whole number from a JSON body."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidRequest(f"'{key}' must be a whole number, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidRequest(f"'{key}' must be a whole number, got {value!r}") from None


def _badges(raw: object) -> frozenset[str]:
    if isinstance(raw, str):
        raw = raw.split(",")
    if not isinstance(raw, list):
        return frozenset()
    return frozenset(str(b).strip().lower() for b in raw if str(b).strip())


def create_app(config: BotConfig | None = None, source: WordListSource | None = None) -> Flask:
    config = config or BotConfig()
    bot = GuessBot(config, source)
    app = Flask(__name__)
    app.config["GUESSBOT"] = bot

    @app.errorhandler(InvalidRequest)
    def invalid_request(e: InvalidRequest):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(DictionaryNotFound)
    def dictionary_not_found(e: DictionaryNotFound):
        return jsonify({"error": str(e), "list": e.identifier}), 404

    @app.route("/lists")
    def lists():
        available = getattr(bot.scanner.source, "available", None)
        return jsonify({"lists": available() if available else []})

    @app.route("/guess", methods=["POST"])
    def guess():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        word = str(data.get("word", "")).strip()
        word_list = str(data.get("list", "")).strip()
        if not word or not word_list:
            return jsonify({"error": "Both 'word' and 'list' are required"}), 400

        cap = _optional_int(data, "cap")
        if cap is None:
            cap = config.search.chunk_cap
        if cap < 1:
            return jsonify({"error": f"'cap' must be positive, got {cap}"}), 400

        search_request = make_request(
            word,
            word_list,
            min_length=_optional_int(data, "min"),
            max_length=_optional_int(data, "max"),
            bonus=_optional_int(data, "bonus"),
            default_min_length=config.search.min_length,
        )
        result = bot.search(search_request)
        messages = [text for text in render(chunk(result, cap)) if text]
        return jsonify({"words": list(result), "messages": messages})

    @app.route("/chat", methods=["POST"])
    def chat():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        message = ChatMessage(
            channel=str(data.get("channel", "")),
            sender=str(data.get("sender", "")),
            text=str(data.get("text", "")),
            badges=_badges(data.get("badges", [])),
        )
        return jsonify({"messages": bot.handle_message(message)})

    return app


def _load_config() -> BotConfig:
    path = os.environ.get("GUESSBOT_CONFIG")
    if not path:
        return BotConfig()
    try:
        return BotConfig.from_yaml(Path(path))
    except ConfigError as e:
        logger.error("Ignoring bad configuration %s: %s", path, e)
        return BotConfig()


app = create_app(_load_config())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    source = app.config["GUESSBOT"].scanner.source
    if isinstance(source, DirectoryWordLists):
        print(f"Word lists in {source.root}: {', '.join(source.available()) or '(none)'}")
    app.run(debug=True, host="0.0.0.0", port=8080)

"""Transport-agnostic guess bot: chat message in, outbound messages out."""

from __future__ import annotations

import logging
import time

from guessbot.chunker import chunk, render
from guessbot.commands import ChatMessage, parse_guess
from guessbot.config import BotConfig
from guessbot.dictionary import DictionaryScanner, DirectoryWordLists, SearchRequest, SearchResult, WordListSource
from guessbot.errors import GuessBotError

logger = logging.getLogger(__name__)


class GuessBot:
    """Answers ``guess`` commands with the words spelled from a letter pool."""

    def __init__(self, config: BotConfig | None = None, source: WordListSource | None = None) -> None:
        self.config = config or BotConfig()
        if source is None:
            source = DirectoryWordLists(self.config.search.word_list_dir)
        self.scanner = DictionaryScanner(source)

    def search(self, request: SearchRequest) -> SearchResult:
        start = time.time()
        result = self.scanner.scan(request)
        elapsed = time.time() - start
        logger.info(
            "Found %d words for %r in %r (%d-%d, %s) in %.3fs",
            len(result), request.pool_word, request.dictionary,
            request.min_length, request.max_length, request.policy, elapsed,
        )
        return result

    def messages(self, result: SearchResult) -> list[str]:
        """Render a result as outbound messages, skipping blank segments."""
        rendered = render(chunk(result, self.config.search.chunk_cap))
        return [text for text in rendered if text]

    def guess(self, request: SearchRequest) -> list[str]:
        return self.messages(self.search(request))

    def handle_message(self, message: ChatMessage) -> list[str]:
        """Answer one chat message.

        Messages that aren't a ``guess`` command from a privileged sender
        get no reply. Malformed commands raise InvalidRequest and unknown
        word lists raise DictionaryNotFound.
        """
        logger.debug("#%s -> %s: %s", message.channel, message.sender, message.text)
        try:
            request = parse_guess(
                message,
                prefix=self.config.chat.prefix,
                allowed_badges=self.config.chat.privileged_badges,
                default_min_length=self.config.search.min_length,
            )
            if request is None:
                return []
            return self.guess(request)
        except GuessBotError as e:
            logger.warning("#%s %s: %s", message.channel, message.sender, e)
            raise

    def respond(self, message: ChatMessage) -> list[str]:
        """Like handle_message, but failed commands give no reply."""
        try:
            return self.handle_message(message)
        except GuessBotError:
            return []

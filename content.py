# content.py
import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

import responses

logger = logging.getLogger(__name__)


class ContentError(Exception):
    pass


def _is_normalized(phrase: str) -> bool:
    return bool(phrase) and phrase == phrase.strip().lower()


class ContentStore:
    """Read-only view over the reply tables, jokes and facts.

    Built once and shared by every session. Construction fails with
    ContentError if an alias points at a phrase missing from the response
    table, if any phrase is not normalized, or if jokes/facts are empty.
    Response table iteration order is insertion order; the substring
    fallback relies on it.
    """

    def __init__(self,
                 responses_table: Optional[Mapping[str, str]] = None,
                 aliases_table: Optional[Mapping[str, str]] = None,
                 joke_list: Optional[Iterable[str]] = None,
                 fact_list: Optional[Iterable[str]] = None):
        table = dict(responses.responses if responses_table is None else responses_table)
        alias_map = dict(responses.aliases if aliases_table is None else aliases_table)
        joke_items = tuple(responses.jokes if joke_list is None else joke_list)
        fact_items = tuple(responses.facts if fact_list is None else fact_list)

        self._validate(table, alias_map, joke_items, fact_items)

        self.responses = MappingProxyType(table)
        self.aliases = MappingProxyType(alias_map)
        self.jokes = joke_items
        self.facts = fact_items
        logger.debug("content loaded: %d responses, %d aliases, %d jokes, %d facts",
                     len(table), len(alias_map), len(joke_items), len(fact_items))

    @staticmethod
    def _validate(table, alias_map, joke_items, fact_items):
        bad_keys = [k for k in table if not _is_normalized(k)]
        if bad_keys:
            logger.error("response keys not normalized: %s", bad_keys)
            raise ContentError(f"response keys must be lower case and trimmed: {bad_keys!r}")

        bad_aliases = [a for a in alias_map if not _is_normalized(a)]
        if bad_aliases:
            logger.error("alias keys not normalized: %s", bad_aliases)
            raise ContentError(f"alias keys must be lower case and trimmed: {bad_aliases!r}")

        dangling = {a: c for a, c in alias_map.items() if c not in table}
        if dangling:
            logger.error("aliases with missing targets: %s", dangling)
            raise ContentError(f"aliases point at unknown phrases: {dangling!r}")

        if not joke_items:
            raise ContentError("joke list must not be empty")
        if not fact_items:
            raise ContentError("fact list must not be empty")

    def lookup(self, phrase: str) -> Optional[str]:
        return self.responses.get(phrase)

    def resolve_alias(self, phrase: str) -> Optional[str]:
        canonical = self.aliases.get(phrase)
        if canonical is None:
            return None
        return self.responses[canonical]

    def find_embedded(self, text: str, min_length: int = 3) -> Optional[str]:
        """Reply for the first response key (insertion order) found inside text."""
        for key, reply in self.responses.items():
            if len(key) >= min_length and key in text:
                return reply
        return None

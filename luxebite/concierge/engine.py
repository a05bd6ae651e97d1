from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from ..config import DEFAULT_APP_CONFIG
from ..menu.catalog import MenuCatalog, get_catalog
from ..menu.models import Category, MenuEntry, Mood
from . import rules
from .models import ConciergeReply, ConversationContext

Handler = Callable[[str], tuple[str, list[MenuEntry]]]


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Callable[[str], bool]
    respond: Handler


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    def predicate(message: str) -> bool:
        return any(k in message for k in keywords)

    return predicate


def _fixed(reply: str, recommendations: list[MenuEntry] | None = None) -> Handler:
    picks = list(recommendations or [])

    def handler(message: str) -> tuple[str, list[MenuEntry]]:
        return reply, list(picks)

    return handler


class Concierge:
    """Rule-based food concierge.

    Each utterance is lower-cased and tested against an ordered rule list;
    the first rule whose predicate matches produces the reply and the
    recommended dishes. Later rules are never consulted, so an utterance that
    mentions both a mood and a diet is answered as a mood request.

    Apart from the greeting draw (``pick_index``) the engine is a pure
    function of the utterance.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        pick_index: Callable[[int], int] = random.randrange,
        clock: Callable[[], datetime] | None = None,
        timezone: str = DEFAULT_APP_CONFIG.timezone,
    ) -> None:
        self._catalog = catalog
        self._pick_index = pick_index
        self._tz = ZoneInfo(timezone)
        self._clock = clock or (lambda: datetime.now(self._tz))
        self._rules = self._build_rules()

    @property
    def rule_names(self) -> list[str]:
        return [r.name for r in self._rules]

    # -- greetings ---------------------------------------------------------

    def greeting_pool(self) -> list[str]:
        """Greetings for the current local hour at the restaurant."""
        hour = self._clock().astimezone(self._tz).hour
        return rules.greetings_for_hour(hour)

    def get_initial_greeting(self) -> str:
        pool = self.greeting_pool()
        return pool[self._pick_index(len(pool))]

    # -- classification ----------------------------------------------------

    def generate_response(
        self,
        utterance: str,
        context: ConversationContext | None = None,
    ) -> ConciergeReply:
        """Classify *utterance* and return the reply with its recommendations.

        *context* is accepted for interface compatibility; it is neither read
        nor modified, and nothing is remembered between calls.
        """
        message = utterance.lower()
        for rule in self._rules:
            if rule.matches(message):
                reply, recommendations = rule.respond(message)
                return ConciergeReply(reply=reply, recommendations=recommendations, intent=rule.name)
        return ConciergeReply(reply=rules.FALLBACK_REPLY, recommendations=[], intent="fallback")

    # -- rule table --------------------------------------------------------

    def _build_rules(self) -> list[Rule]:
        catalog = self._catalog
        limit = rules.RECOMMENDATION_LIMIT

        table: list[Rule] = [
            Rule("greeting", lambda m: bool(rules.GREETING_RE.match(m)), self._greet),
        ]

        for mood, keywords in rules.MOOD_KEYWORDS.items():
            table.append(Rule(
                f"mood:{mood.value}",
                _contains_any(*keywords),
                _fixed(rules.MOOD_REPLIES[mood], catalog.get_by_mood(mood)[:limit]),
            ))

        occasion_picks = [
            e for e in catalog.get_all() if Mood.romantic in e.moods or e.featured
        ][:limit]
        for occasion, keywords in rules.OCCASION_KEYWORDS.items():
            table.append(Rule(
                f"occasion:{occasion}",
                _contains_any(*keywords),
                _fixed(rules.OCCASION_REPLIES[occasion], occasion_picks),
            ))

        vegetarian = [e for e in catalog.get_all() if "vegetarian" in e.dietary]
        gluten_free = [e for e in catalog.get_all() if "gluten-free" in e.dietary][:limit]
        low, high = catalog.price_range()
        chefs_selection = catalog.get_by_category(Category.chefs_selection)
        chefs_picks = (
            chefs_selection + [e for e in catalog.get_featured() if e not in chefs_selection]
        )[:limit]
        dairy_free = [e for e in map(catalog.get_by_id, rules.DAIRY_FREE_IDS) if e is not None]

        table.extend([
            Rule(
                "dietary:vegetarian",
                _contains_any(*rules.VEGETARIAN_KEYWORDS),
                _fixed(rules.VEGETARIAN_REPLY, vegetarian),
            ),
            Rule(
                "dietary:gluten-free",
                _contains_any(*rules.GLUTEN_KEYWORDS),
                _fixed(rules.GLUTEN_REPLY, gluten_free),
            ),
            Rule("pairing", _contains_any(*rules.PAIRING_KEYWORDS), self._pair),
            Rule(
                "recommendation",
                _contains_any(*rules.RECOMMEND_KEYWORDS),
                _fixed(rules.RECOMMEND_REPLY, catalog.get_featured()),
            ),
            Rule(
                "category:appetizers",
                _contains_any(*rules.APPETIZER_KEYWORDS),
                _fixed(rules.APPETIZER_REPLY, catalog.get_by_category(Category.appetizers)[:limit]),
            ),
            Rule(
                "category:mains",
                _contains_any(*rules.MAIN_KEYWORDS),
                _fixed(rules.MAIN_REPLY, catalog.get_by_category(Category.mains)[:limit]),
            ),
            Rule(
                "category:desserts",
                _contains_any(*rules.DESSERT_KEYWORDS),
                _fixed(rules.DESSERT_REPLY, catalog.get_by_category(Category.desserts)),
            ),
            Rule(
                "price",
                _contains_any(*rules.PRICE_KEYWORDS),
                _fixed(rules.PRICE_REPLY_TEMPLATE.format(low=low, high=high)),
            ),
            Rule("reservation", _contains_any(*rules.RESERVATION_KEYWORDS), self._reserve),
            Rule(
                "category:chefs-selection",
                lambda m: "chef" in m and any(w in m for w in rules.CHEF_SELECTION_WORDS),
                _fixed(rules.CHEF_SELECTION_REPLY, chefs_picks),
            ),
            Rule(
                "tasting-menu",
                _contains_any(*rules.TASTING_KEYWORDS),
                _fixed(rules.TASTING_REPLY, chefs_selection),
            ),
            Rule(
                "dietary:dairy-free",
                _contains_any(*rules.DAIRY_KEYWORDS),
                _fixed(rules.DAIRY_REPLY, dairy_free),
            ),
            Rule("dietary:allergies", _contains_any(*rules.ALLERGY_KEYWORDS), _fixed(rules.ALLERGY_REPLY)),
            Rule("payment", _contains_any(*rules.PAYMENT_KEYWORDS), _fixed(rules.PAYMENT_REPLY)),
            Rule(
                "private-events",
                _contains_any(*rules.PRIVATE_EVENT_KEYWORDS),
                _fixed(rules.PRIVATE_EVENT_REPLY),
            ),
            Rule("info:hours", _contains_any(*rules.HOURS_KEYWORDS), _fixed(rules.HOURS_REPLY)),
            Rule("info:location", _contains_any(*rules.LOCATION_KEYWORDS), _fixed(rules.LOCATION_REPLY)),
            Rule("info:contact", _contains_any(*rules.CONTACT_KEYWORDS), _fixed(rules.CONTACT_REPLY)),
            Rule("info:delivery", _contains_any(*rules.DELIVERY_KEYWORDS), _fixed(rules.DELIVERY_REPLY)),
            Rule("thanks", _contains_any(*rules.THANKS_KEYWORDS), _fixed(rules.THANKS_REPLY)),
        ])
        return table

    def _greet(self, message: str) -> tuple[str, list[MenuEntry]]:
        return self.get_initial_greeting(), []

    def _pair(self, message: str) -> tuple[str, list[MenuEntry]]:
        for dish, wisdom in rules.PAIRING_WISDOM.items():
            if dish in message:
                return wisdom, []
        return rules.PAIRING_PROMPT_REPLY, []

    def _reserve(self, message: str) -> tuple[str, list[MenuEntry]]:
        if any(k in message for k in rules.RESERVATION_CHANGE_KEYWORDS):
            return rules.RESERVATION_CHANGE_REPLY, []
        if any(k in message for k in rules.RESERVATION_GROUP_KEYWORDS):
            return rules.RESERVATION_GROUP_REPLY, []
        return rules.RESERVATION_REPLY, []


_concierge: Concierge | None = None


def get_concierge() -> Concierge:
    """Return the process-wide concierge over the default catalog."""
    global _concierge
    if _concierge is None:
        _concierge = Concierge(get_catalog())
    return _concierge


def generate_response(
    utterance: str,
    context: ConversationContext | None = None,
) -> ConciergeReply:
    return get_concierge().generate_response(utterance, context)


def get_initial_greeting() -> str:
    return get_concierge().get_initial_greeting()

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

from luxebite.app import app
from luxebite.concierge import rules
from luxebite.concierge.engine import Concierge, generate_response, get_concierge, get_initial_greeting
from luxebite.concierge.models import ConversationContext
from luxebite.menu.catalog import get_catalog
from luxebite.menu.models import Category, Mood

client = TestClient(app)
catalog = get_catalog()

COLOMBO = ZoneInfo("Asia/Colombo")
EVENING = datetime(2026, 10, 19, 19, 30, tzinfo=COLOMBO)
ALL_GREETINGS = rules.MORNING_GREETINGS + rules.AFTERNOON_GREETINGS + rules.EVENING_GREETINGS


def _concierge(pick=lambda n: 0, at=EVENING) -> Concierge:
    return Concierge(catalog, pick_index=pick, clock=lambda: at)


def _ids(entries):
    return [e.id for e in entries]


concierge = _concierge()


# ── Greetings ────────────────────────────────────────────────────────────


class TestGreeting:
    @pytest.mark.parametrize("text", ["hi", "Hello there", "HEY!", "good evening", "Greetings, friend"])
    def test_greeting_has_no_recommendations(self, text):
        result = concierge.generate_response(text)
        assert result.intent == "greeting"
        assert result.recommendations == []
        assert result.reply in rules.EVENING_GREETINGS

    def test_pinned_index_selects_greeting(self):
        result = _concierge(pick=lambda n: 2).generate_response("hello")
        assert result.reply == rules.EVENING_GREETINGS[2]

    def test_greeting_must_lead_the_message(self):
        assert concierge.generate_response("well, hello").intent == "fallback"

    def test_morning_pool(self):
        morning = _concierge(at=datetime(2026, 10, 19, 8, 0, tzinfo=COLOMBO))
        assert morning.greeting_pool() == rules.MORNING_GREETINGS
        assert morning.get_initial_greeting() == rules.MORNING_GREETINGS[0]

    def test_afternoon_pool(self):
        afternoon = _concierge(at=datetime(2026, 10, 19, 13, 0, tzinfo=COLOMBO))
        assert afternoon.greeting_pool() == rules.AFTERNOON_GREETINGS

    def test_clock_is_read_in_restaurant_time(self):
        # 03:00 UTC is 08:30 in Colombo
        utc_clock = _concierge(at=datetime(2026, 10, 19, 3, 0, tzinfo=timezone.utc))
        assert utc_clock.greeting_pool() == rules.MORNING_GREETINGS

    def test_initial_greeting_covers_pool(self):
        randomized = Concierge(catalog, clock=lambda: EVENING)
        seen = {randomized.get_initial_greeting() for _ in range(200)}
        assert seen == set(rules.EVENING_GREETINGS)

    def test_initial_greeting_uses_injected_index(self):
        draws = iter([3, 1])
        pinned = _concierge(pick=lambda n: next(draws))
        assert pinned.get_initial_greeting() == rules.EVENING_GREETINGS[3]
        assert pinned.get_initial_greeting() == rules.EVENING_GREETINGS[1]


# ── Moods & occasions ────────────────────────────────────────────────────


class TestMoods:
    @pytest.mark.parametrize(
        "text, mood",
        [
            ("I want something romantic", Mood.romantic),
            ("a little romance tonight", Mood.romantic),
            ("dinner with my partner", Mood.romantic),
            ("let's splurge", Mood.indulgent),
            ("I deserve a treat", Mood.indulgent),
            ("something healthy", Mood.light),
            ("keep it light", Mood.light),
            ("surprise me", Mood.adventurous),
            ("I want to try something new", Mood.adventurous),
        ],
    )
    def test_mood_keywords(self, text, mood):
        result = concierge.generate_response(text)
        assert result.intent == f"mood:{mood.value}"
        assert result.reply == rules.MOOD_REPLIES[mood]
        assert len(result.recommendations) <= rules.RECOMMENDATION_LIMIT
        assert all(mood in e.moods for e in result.recommendations)
        assert _ids(result.recommendations) == _ids(catalog.get_by_mood(mood)[:3])

    def test_mood_beats_dietary(self):
        result = concierge.generate_response("romantic vegetarian options")
        assert result.intent == "mood:romantic"
        assert all(Mood.romantic in e.moods for e in result.recommendations)
        # app-3 is romantic but not vegetarian
        assert "app-3" in _ids(result.recommendations)

    def test_first_mood_in_table_order_wins(self):
        result = concierge.generate_response("something light and adventurous")
        assert result.intent == "mood:light"


class TestOccasions:
    def test_anniversary_scenario(self):
        result = concierge.generate_response("I'm celebrating our anniversary tonight")
        assert result.intent == "occasion:anniversary"
        assert result.reply == rules.OCCASION_REPLIES["anniversary"]
        assert len(result.recommendations) <= 3
        assert all(Mood.romantic in e.moods or e.featured for e in result.recommendations)

    @pytest.mark.parametrize(
        "text, occasion",
        [
            ("It's my birthday", "birthday"),
            ("dinner with a client", "business"),
            ("a business dinner", "business"),
            ("planning a date", "date"),
        ],
    )
    def test_occasion_keywords(self, text, occasion):
        result = concierge.generate_response(text)
        assert result.intent == f"occasion:{occasion}"
        assert result.reply == rules.OCCASION_REPLIES[occasion]
        expected = [e for e in catalog.get_all() if Mood.romantic in e.moods or e.featured][:3]
        assert _ids(result.recommendations) == _ids(expected)


# ── Dietary ──────────────────────────────────────────────────────────────


class TestDietary:
    @pytest.mark.parametrize("text", ["Do you have vegetarian dishes?", "any vegan food"])
    def test_vegetarian_is_not_truncated(self, text):
        result = concierge.generate_response(text)
        expected = [e for e in catalog.get_all() if "vegetarian" in e.dietary]
        assert result.intent == "dietary:vegetarian"
        assert _ids(result.recommendations) == _ids(expected)
        assert len(result.recommendations) > rules.RECOMMENDATION_LIMIT

    @pytest.mark.parametrize("text", ["I'm celiac", "gluten free please"])
    def test_gluten_free_is_capped(self, text):
        result = concierge.generate_response(text)
        assert result.intent == "dietary:gluten-free"
        assert len(result.recommendations) == 3
        assert all("gluten-free" in e.dietary for e in result.recommendations)


# ── Pairing ──────────────────────────────────────────────────────────────


class TestPairing:
    @pytest.mark.parametrize(
        "text, dish",
        [
            ("What wine goes with the wagyu?", "wagyu"),
            ("which drink pairs with lobster", "lobster"),
            ("pairing for the risotto", "risotto"),
            ("any wine for dessert?", "dessert"),
        ],
    )
    def test_dish_specific_pairing(self, text, dish):
        result = concierge.generate_response(text)
        assert result.intent == "pairing"
        assert result.reply == rules.PAIRING_WISDOM[dish]
        assert result.recommendations == []

    def test_generic_pairing_asks_for_dish(self):
        result = concierge.generate_response("I'd like some wine")
        assert result.reply == rules.PAIRING_PROMPT_REPLY
        assert result.recommendations == []


# ── Recommendations & categories ─────────────────────────────────────────


class TestRecommendations:
    @pytest.mark.parametrize("text", ["What do you recommend?", "suggest something", "what should I order"])
    def test_featured_is_not_truncated(self, text):
        result = concierge.generate_response(text)
        assert result.intent == "recommendation"
        assert _ids(result.recommendations) == _ids(catalog.get_featured())
        assert len(result.recommendations) == 4

    def test_popular_tonight_falls_through(self):
        result = concierge.generate_response("what's popular tonight?")
        assert result.intent == "fallback"
        assert result.reply == rules.FALLBACK_REPLY
        assert result.recommendations == []


class TestCategories:
    def test_appetizers_capped(self):
        result = concierge.generate_response("Show me your starters")
        assert result.intent == "category:appetizers"
        assert _ids(result.recommendations) == ["app-1", "app-2", "app-3"]

    def test_mains_capped(self):
        result = concierge.generate_response("What are the main courses?")
        assert result.intent == "category:mains"
        assert _ids(result.recommendations) == ["main-1", "main-2", "main-3"]

    def test_entree_with_accent(self):
        assert concierge.generate_response("Which Entrée?").intent == "category:mains"

    @pytest.mark.parametrize("text", ["Tell me about desserts", "something sweet"])
    def test_desserts_not_truncated(self, text):
        result = concierge.generate_response(text)
        assert result.intent == "category:desserts"
        assert _ids(result.recommendations) == _ids(catalog.get_by_category(Category.desserts))


# ── Price, house info, fallback ──────────────────────────────────────────


class TestInformational:
    def test_price_cites_catalog_range(self):
        result = concierge.generate_response("What's your price range?")
        assert result.intent == "price"
        assert "$18" in result.reply and "$225" in result.reply
        assert result.recommendations == []

    @pytest.mark.parametrize(
        "text, intent",
        [
            ("What are your opening hours?", "info:hours"),
            ("What's your address?", "info:location"),
            ("Can I get your phone number?", "info:contact"),
            ("Do you do delivery?", "info:delivery"),
            ("thank you!", "thanks"),
        ],
    )
    def test_house_information(self, text, intent):
        result = concierge.generate_response(text)
        assert result.intent == intent
        assert result.recommendations == []

    @pytest.mark.parametrize(
        "text, intent",
        [
            ("How do I book a table?", "reservation"),
            ("I need to make a reservation", "reservation"),
            ("what is in the chef's selection?", "category:chefs-selection"),
            ("any chef specials?", "category:chefs-selection"),
            ("Tell me about the tasting menu", "tasting-menu"),
            ("is the omakase worth it", "tasting-menu"),
            ("I'm lactose intolerant", "dietary:dairy-free"),
            ("anything without dairy?", "dietary:dairy-free"),
            ("I have a nut allergy", "dietary:allergies"),
            ("do you take card payment?", "payment"),
            ("can I pay with cash", "payment"),
            ("Do you host private events?", "private-events"),
            ("planning a party for 12", "private-events"),
        ],
    )
    def test_reservations_menus_and_policies(self, text, intent):
        assert concierge.generate_response(text).intent == intent

    @pytest.mark.parametrize(
        "text, reply",
        [
            ("can I book a table for friday", rules.RESERVATION_REPLY),
            ("I need to cancel my reservation", rules.RESERVATION_CHANGE_REPLY),
            ("what party size can you book?", rules.RESERVATION_GROUP_REPLY),
        ],
    )
    def test_reservation_replies(self, text, reply):
        result = concierge.generate_response(text)
        assert result.reply == reply
        assert result.recommendations == []

    def test_chefs_selection_leads_with_its_category(self):
        result = concierge.generate_response("what is in the chef's selection?")
        assert _ids(result.recommendations) == ["chef-1", "chef-2", "app-1"]

    def test_tasting_menu_recommends_chefs_selection(self):
        result = concierge.generate_response("Tell me about the tasting menu")
        assert _ids(result.recommendations) == _ids(catalog.get_by_category(Category.chefs_selection))

    def test_dairy_free_picks(self):
        result = concierge.generate_response("anything without dairy?")
        assert _ids(result.recommendations) == ["app-2", "main-5"]

    def test_payment_before_delivery(self):
        assert concierge.generate_response("can I pay with cash on delivery?").intent == "payment"

    def test_fallback_is_total(self):
        for text in ["Tell me a story", "", "???", "12345"]:
            result = concierge.generate_response(text)
            assert result.intent == "fallback"
            assert result.reply == rules.FALLBACK_REPLY
            assert result.recommendations == []


# ── Contract ─────────────────────────────────────────────────────────────


class TestContract:
    def test_rule_order(self):
        assert concierge.rule_names == [
            "greeting",
            "mood:romantic",
            "mood:indulgent",
            "mood:light",
            "mood:adventurous",
            "occasion:anniversary",
            "occasion:birthday",
            "occasion:business",
            "occasion:date",
            "dietary:vegetarian",
            "dietary:gluten-free",
            "pairing",
            "recommendation",
            "category:appetizers",
            "category:mains",
            "category:desserts",
            "price",
            "reservation",
            "category:chefs-selection",
            "tasting-menu",
            "dietary:dairy-free",
            "dietary:allergies",
            "payment",
            "private-events",
            "info:hours",
            "info:location",
            "info:contact",
            "info:delivery",
            "thanks",
        ]

    def test_idempotent(self):
        context = ConversationContext()
        first = concierge.generate_response("romantic dinner", context)
        second = concierge.generate_response("romantic dinner", context)
        assert first == second

    def test_context_is_ignored_and_untouched(self):
        context = ConversationContext(mood="light", dietary=["vegan"], occasion="birthday")
        before = context.model_copy(deep=True)
        result = concierge.generate_response("what should I order", context)
        assert result.intent == "recommendation"
        assert context == before

    def test_mutating_result_does_not_leak(self):
        first = concierge.generate_response("something sweet")
        first.recommendations.clear()
        assert len(concierge.generate_response("something sweet").recommendations) == 3

    def test_module_level_functions(self):
        assert generate_response("vegan").intent == "dietary:vegetarian"
        assert get_initial_greeting() in ALL_GREETINGS
        assert get_concierge() is get_concierge()


# ── Chat endpoint ────────────────────────────────────────────────────────


class TestChatEndpoint:
    def test_chat_returns_reply_and_dishes(self):
        resp = client.post("/concierge/chat", json={"message": "vegan options"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["intent"] == "dietary:vegetarian"
        assert body["reply"] == rules.VEGETARIAN_REPLY
        assert len(body["recommendations"]) == 5

    def test_chat_rejects_empty_message(self):
        assert client.post("/concierge/chat", json={"message": ""}).status_code == 422

    def test_greeting_endpoint(self):
        app.dependency_overrides[get_concierge] = lambda: _concierge(pick=lambda n: 1)
        try:
            resp = client.get("/concierge/greeting")
        finally:
            app.dependency_overrides.clear()
        assert resp.status_code == 200
        assert resp.json()["reply"] == rules.EVENING_GREETINGS[1]

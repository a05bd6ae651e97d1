from __future__ import annotations

from collections import Counter
from typing import Any

from ..menu.catalog import MenuCatalog


def compute_concierge_analytics(
    events: list[dict[str, Any]],
    catalog: MenuCatalog,
) -> dict[str, Any]:
    chats = [e for e in events if e["type"] == "concierge_chat"]
    total = len(chats)

    intent_counter: Counter[str] = Counter(c["intent"] for c in chats)
    top_intents = [{"name": n, "count": c} for n, c in intent_counter.most_common()]

    fallback = intent_counter.get("fallback", 0)

    # Recommendation volume
    shown = [len(c["recommendation_ids"]) for c in chats]
    avg_recommendations = round(sum(shown) / total, 2) if total else 0.0

    dish_counter: Counter[str] = Counter()
    for c in chats:
        dish_counter.update(c["recommendation_ids"])
    top_dishes = []
    for dish_id, count in dish_counter.most_common(5):
        entry = catalog.get_by_id(dish_id)
        top_dishes.append({
            "id": dish_id,
            "name": entry.name if entry else dish_id,
            "count": count,
        })

    return {
        "total_chats": total,
        "intents": top_intents,
        "fallback_rate": round(fallback / total * 100, 1) if total else 0.0,
        "avg_recommendations": avg_recommendations,
        "top_recommended_dishes": top_dishes,
    }

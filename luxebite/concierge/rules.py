from __future__ import annotations

import re

from ..menu.models import Mood

RECOMMENDATION_LIMIT = 3

# ---------------------------------------------------------------------------
# Greetings
# ---------------------------------------------------------------------------

GREETING_RE = re.compile(
    r"^(hi|hello|hey|good evening|greetings|good morning|good afternoon)",
    re.IGNORECASE,
)

MORNING_GREETINGS = [
    "Good morning! Welcome to LUXE BITE. How may I start your day with culinary excellence?",
    "Good morning! I'm your personal food concierge. Ready to plan something special?",
    "A wonderful morning to you! How may I enhance your dining experience today?",
]

AFTERNOON_GREETINGS = [
    "Good afternoon! Welcome to LUXE BITE. What brings you to us today?",
    "Good afternoon! I'm your personal food concierge. How may I assist you?",
    "A lovely afternoon! Let me guide you through our exceptional menu.",
]

EVENING_GREETINGS = [
    "Good evening! Welcome to LUXE BITE. What brings you to us tonight?",
    "Good evening! I'm your personal food concierge. How may I enhance your dining experience?",
    "Good evening! It's my pleasure to guide you through our menu. What are you in the mood for?",
    "Greetings! I'm here to make your LUXE BITE experience exceptional. How may I assist you?",
]


def greetings_for_hour(hour: int) -> list[str]:
    """Morning runs 05:00-11:59, afternoon 12:00-14:59, evening the rest."""
    if 5 <= hour < 12:
        return MORNING_GREETINGS
    if 12 <= hour < 15:
        return AFTERNOON_GREETINGS
    return EVENING_GREETINGS


# ---------------------------------------------------------------------------
# Moods
# ---------------------------------------------------------------------------

# Insertion order is the test order.
MOOD_KEYWORDS: dict[Mood, tuple[str, ...]] = {
    Mood.romantic: ("romantic", "romance", "love", "partner", "couple"),
    Mood.indulgent: ("indulgent", "indulge", "treat", "splurge", "luxury"),
    Mood.light: ("light", "fresh", "healthy", "clean eating"),
    Mood.adventurous: ("adventurous", "adventure", "surprise", "new", "exotic"),
}

MOOD_REPLIES: dict[Mood, str] = {
    Mood.romantic: (
        "For a romantic evening, I have some exquisite suggestions. Our Butter-Poached "
        "Lobster with champagne beurre blanc sets the perfect mood, or perhaps the Truffle "
        "Burrata to start. Both are favorites among couples."
    ),
    Mood.indulgent: (
        "Ah, you're in the mood to indulge! May I suggest our A5 Wagyu Ribeye? It's pure "
        "decadence. For dessert, our Dark Chocolate Soufflé is legendary."
    ),
    Mood.light: (
        "For something lighter yet satisfying, our Mediterranean Branzino is a beautiful "
        "choice: delicate, fresh and perfectly seasoned. The Tuna Tartare is also exquisite."
    ),
    Mood.adventurous: (
        "I love your adventurous spirit! Our Omakase Experience will take you on a culinary "
        "journey you won't forget. Chef's surprise courses await."
    ),
}

# ---------------------------------------------------------------------------
# Occasions
# ---------------------------------------------------------------------------

OCCASION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "anniversary": ("anniversary", "celebrating", "milestone"),
    "birthday": ("birthday", "bday", "b-day"),
    "business": ("business", "client", "meeting", "corporate"),
    "date": ("date",),
}

OCCASION_REPLIES: dict[str, str] = {
    "anniversary": (
        "An anniversary! How wonderful. For such a special milestone, I'd recommend our "
        "Seasonal Tasting Menu with wine pairing. Seven courses of pure romance. We can also "
        "arrange special table decorations and a personalized dessert."
    ),
    "birthday": (
        "Happy birthday celebrations! We can arrange a personalized dessert with a special "
        "touch. Our pastry chef creates magic with chocolate and custom decorations. Just let "
        "us know the celebrant's name!"
    ),
    "business": (
        "For a business dinner, I suggest dishes that are elegant yet easy to enjoy while "
        "conversing. The Wild Mushroom Risotto or Branzino are excellent choices. We also "
        "have private dining rooms available for important meetings."
    ),
    "date": (
        "A date night deserves something memorable. Start with our Oysters Rockefeller, "
        "followed by dishes you can share. I recommend a romantic table by the window."
    ),
}

# ---------------------------------------------------------------------------
# Dietary
# ---------------------------------------------------------------------------

VEGETARIAN_KEYWORDS = ("vegetarian", "vegan", "no meat")
VEGETARIAN_REPLY = (
    "We have lovely vegetarian options! Our Wild Mushroom Risotto is sublime, earthy and "
    "comforting. The Truffle Burrata is vegetarian-friendly and absolutely divine, and all "
    "of our desserts are vegetarian too."
)

GLUTEN_KEYWORDS = ("gluten", "celiac")
GLUTEN_REPLY = (
    "Many of our dishes are naturally gluten-free! I'd recommend the A5 Wagyu, the "
    "Butter-Poached Lobster, or our Branzino, all prepared without gluten. Let me know your "
    "selection and I'll confirm with the kitchen."
)

# ---------------------------------------------------------------------------
# Pairings
# ---------------------------------------------------------------------------

PAIRING_KEYWORDS = ("pair", "wine", "drink", "beverage")

# Tested in insertion order; the first dish named wins.
PAIRING_WISDOM: dict[str, str] = {
    "wagyu": (
        "For the Wagyu, I'd suggest an aged Bordeaux or Cabernet Sauvignon. The tannins "
        "complement the rich marbling beautifully."
    ),
    "lobster": (
        "With the Lobster, a vintage Champagne or Chardonnay creates magic. The bubbles or "
        "buttery notes cleanse the palate between each luxurious bite."
    ),
    "risotto": (
        "The Wild Mushroom Risotto pairs wonderfully with a Barolo or Pinot Noir: earthy "
        "meets earthy in perfect harmony."
    ),
    "dessert": (
        "For dessert, consider a Tawny Port with chocolate, or a Moscato d'Asti with our "
        "fruit-based options. Our sommelier can guide you through our dessert wine selection."
    ),
}

PAIRING_PROMPT_REPLY = (
    "Wine pairing is my passion. Tell me which dish you're considering, and I'll suggest "
    "the perfect complement. We also offer cocktails, mocktails, and specialty beverages!"
)

# ---------------------------------------------------------------------------
# Recommendations and categories
# ---------------------------------------------------------------------------

RECOMMEND_KEYWORDS = ("recommend", "suggest", "what should")
RECOMMEND_REPLY = (
    "Tonight I'd point you to our signature dishes: the Truffle Burrata to start, the A5 "
    "Wagyu Ribeye for the main event, and the Dark Chocolate Soufflé to finish. For the full "
    "experience, the Seasonal Tasting Menu is unforgettable."
)

APPETIZER_KEYWORDS = ("appetizer", "starter", "first course")
APPETIZER_REPLY = (
    "For starters, our Truffle Burrata is a guest favorite: creamy, aromatic and absolutely "
    "indulgent. The Tuna Tartare offers a lighter, fresher option, and the Oysters "
    "Rockefeller are perfect for special occasions!"
)

MAIN_KEYWORDS = ("main", "entrée", "entree")
MAIN_REPLY = (
    "For your main course, the choice often comes down to your mood. Rich and bold? The A5 "
    "Wagyu Ribeye. Elegant and refined? The Butter-Poached Lobster. Light and fresh? The "
    "Mediterranean Branzino. What appeals to you?"
)

DESSERT_KEYWORDS = ("dessert", "sweet", "after dinner")
DESSERT_REPLY = (
    "Save room for dessert! Our Dark Chocolate Soufflé is legendary; it takes 20 minutes, so "
    "order early. The Crème Brûlée is perfect for vanilla lovers, and the Passion Fruit "
    "Pavlova is bright and light."
)

# ---------------------------------------------------------------------------
# Price
# ---------------------------------------------------------------------------

PRICE_KEYWORDS = ("price", "budget", "expensive", "cost", "cheap")
PRICE_REPLY_TEMPLATE = (
    "Our dishes range from ${low} to ${high}. Appetizers and desserts sit at the lower end, "
    "while the Chef's Selection experiences are our most exclusive offerings. Every dish "
    "offers exceptional value for its quality!"
)

# ---------------------------------------------------------------------------
# Reservations, menus and policies
# ---------------------------------------------------------------------------

RESERVATION_KEYWORDS = ("reserv", "book", "a table")
RESERVATION_CHANGE_KEYWORDS = ("cancel", "modify", "change")
RESERVATION_GROUP_KEYWORDS = ("how many", "party size", "large group")

RESERVATION_REPLY = (
    "I'd be delighted to help you reserve a table! Visit our Reservations page, choose your "
    "date, time and party size, and add any special requests. For special occasions, let me "
    "know so we can make it memorable!"
)
RESERVATION_CHANGE_REPLY = (
    "To modify or cancel a reservation, visit our Reservations page or call us at "
    "+94 759560114 and we'll take care of it right away."
)
RESERVATION_GROUP_REPLY = (
    "We seat parties of up to 20 guests. For groups of 9 or more we host private events with "
    "customized menus, so just mention the size of your party when booking!"
)

CHEF_SELECTION_WORDS = ("selection", "special")
CHEF_SELECTION_REPLY = (
    "Chef's Selection features our most exceptional dishes, prepared with the finest "
    "ingredients. It changes with the seasons but always represents the pinnacle of our "
    "culinary artistry. The Seasonal Tasting Menu and the Omakase Experience lead it tonight."
)

TASTING_KEYWORDS = ("tasting", "course menu", "omakase")
TASTING_REPLY = (
    "Our Seasonal Tasting Menu is a seven-course journey through the best of our kitchen, "
    "each course paired with wine. For something more daring, the Omakase Experience leaves "
    "every course to the chef. Advance reservation is required for both!"
)

DAIRY_KEYWORDS = ("dairy", "lactose", "milk")
DAIRY_FREE_IDS = ("app-2", "main-5")
DAIRY_REPLY = (
    "We can accommodate dairy-free requirements! Many seafood and meat dishes are naturally "
    "dairy-free, and our chefs can adapt others. The Tuna Tartare and the Branzino are "
    "excellent dairy-free options."
)

ALLERGY_KEYWORDS = ("allerg", "intolerance")
ALLERGY_REPLY = (
    "Food allergies are serious, and we take them seriously too. Please tell your server about "
    "any allergies when ordering and our kitchen will prepare your meal with extra care. We "
    "can accommodate nut, shellfish, dairy and gluten allergies."
)

PAYMENT_KEYWORDS = ("payment", "pay by", "pay with", "pay on", "card", "cash")
PAYMENT_REPLY = (
    "We accept credit and debit cards, cash on delivery and bank transfer. All transactions "
    "are secure and encrypted!"
)

PRIVATE_EVENT_KEYWORDS = ("private", "event", "party")
PRIVATE_EVENT_REPLY = (
    "We host private events for groups of 9 or more! Our private dining room seats up to 20 "
    "guests, with customized menus, wine pairings and personalized service. Email "
    "naveeth@luxebite.com or call +94 759560114 to plan your event."
)

# ---------------------------------------------------------------------------
# House information
# ---------------------------------------------------------------------------

HOURS_KEYWORDS = ("hour", "opening", "open tonight", "when are you open")
HOURS_REPLY = (
    "Our hours: Mon-Thu 5:30 PM - 10:00 PM, Fri-Sat 5:00 PM - 11:00 PM, Sun 5:00 PM - "
    "9:00 PM. We recommend reservations for the best experience!"
)

LOCATION_KEYWORDS = ("location", "address", "where are you")
LOCATION_REPLY = (
    "We're located at Old BOC Lane, Kinniya - 04, Trincomalee. Look for the elegant noir "
    "and gold facade. Parking is available nearby."
)

CONTACT_KEYWORDS = ("contact", "phone", "email")
CONTACT_REPLY = (
    "You can reach us by phone at +94 759560114 or by email at naveeth@luxebite.com. "
    "I'm also here to answer any questions right away!"
)

DELIVERY_KEYWORDS = ("delivery", "takeout", "take out", "take away")
DELIVERY_REPLY = (
    "Yes! We offer delivery and takeout. Browse our menu, add items to your cart, and "
    "choose delivery at checkout. Our dishes are carefully packaged to maintain quality."
)

THANKS_KEYWORDS = ("thank", "appreciate")
THANKS_REPLY = (
    "It's my absolute pleasure! I'm here whenever you need assistance. Enjoy your dining "
    "experience at LUXE BITE!"
)

# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------

FALLBACK_REPLY = (
    "I'd love to help you discover the perfect experience tonight! Tell me about the "
    "occasion, the mood you're in, or any dietary preferences, and I'll find the dishes "
    "for you. I can also help with wine pairings, reservations and our hours."
)

"""
Food concierge.

Responsibilities:
- Classify a diner's free-text message with an ordered keyword rule list.
- Reply with a canned answer and a bounded set of dishes from the catalog.
- Greet new conversations with a time-of-day appropriate opener.
"""

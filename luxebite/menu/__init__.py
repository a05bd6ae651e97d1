"""
Menu catalog.

Responsibilities:
- Hold the static, immutable list of dishes defined at startup.
- Answer lookups by id, category, mood and featured flag in menu order.
- Describe the category and mood filters shown on the menu page.
"""

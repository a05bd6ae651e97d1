"""
LUXE BITE restaurant backend.

Responsibilities:
- Serve the static menu catalog and the rule-based food concierge.
- Accept delivery orders and table reservations.
- Give staff an authenticated dashboard over orders and reservations.
"""

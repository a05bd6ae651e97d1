"""
Delivery orders.

Responsibilities:
- Price incoming orders from the menu catalog and add the delivery fee.
- Persist orders through the injected document store.
- Give the admin dashboard status filters, status updates and today's totals.
"""

"""
Table reservations.

Responsibilities:
- Record booking requests with a human-facing reference number.
- List bookings by date, status and the upcoming window for staff.
"""

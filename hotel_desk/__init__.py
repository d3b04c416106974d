"""In-memory hotel front desk: rooms, reservations and billing."""

__version__ = "0.1.0"

"""API routes package"""

from . import health, dinners, todos, events, invites, shopping_lists

__all__ = ["health", "dinners", "todos", "events", "invites", "shopping_lists"]

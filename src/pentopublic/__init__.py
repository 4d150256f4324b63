"""PentoPublic browser client: admin moderation dashboard and reader catalog."""

__version__ = "0.3.0"

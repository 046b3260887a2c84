"""Translation of Kura device replies into the platform's internal messages."""

__version__ = "0.1.0"

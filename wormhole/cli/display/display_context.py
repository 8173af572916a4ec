"""Process-wide display context."""

from .DisplayContext import DisplayContext

display_context = DisplayContext()

"""JSON map persistence backend."""

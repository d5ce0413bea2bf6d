"""Request builders and response parsers for the Rituals endpoints."""

"""External AI services: completion providers and the fallback chain over them."""

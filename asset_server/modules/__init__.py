"""Domain modules (assets, feature flags)."""

"""Per-user preferences and site-wide admin settings."""

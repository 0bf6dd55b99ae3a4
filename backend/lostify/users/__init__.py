"""Admin user management."""

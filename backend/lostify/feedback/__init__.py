"""Contact form feedback and its admin triage."""

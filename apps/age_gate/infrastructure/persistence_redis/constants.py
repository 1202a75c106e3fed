"""Redis Key Constants."""

SESSION_KEY_PREFIX = "age_gate:session:"

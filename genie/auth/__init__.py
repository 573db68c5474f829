"""Authentication: decision rules, tokens, Google exchange and sessions."""

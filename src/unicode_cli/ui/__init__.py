"""User-facing interfaces for unicode-cli."""

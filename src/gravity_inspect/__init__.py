"""Gravity Inspect - verification, export and CLI for stored contract state."""

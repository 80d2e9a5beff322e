"""Service layer helpers for the catering API."""

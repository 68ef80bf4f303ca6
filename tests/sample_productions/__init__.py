"""Productions registered on import, used by the loader tests."""

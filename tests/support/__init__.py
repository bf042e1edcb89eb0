"""Handler modules shared by the unit tests."""

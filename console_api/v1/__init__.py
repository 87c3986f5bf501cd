"""Version 1 of the console API."""

"""Version 1 of the Rasya Production API."""

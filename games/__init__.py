"""Games built on the GameKit framework."""

"""Terminal and JSON reporters."""

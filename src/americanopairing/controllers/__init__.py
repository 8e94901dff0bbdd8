"""Controllers coordinating the tournament workflow."""

"""Data models for Americano Pairing."""

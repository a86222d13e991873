"""Chat module - history of messages between two users."""

"""Message store services."""

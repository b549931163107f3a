"""Message rendering and delivery."""

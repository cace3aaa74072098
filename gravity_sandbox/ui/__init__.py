"""Interactive sandbox application."""

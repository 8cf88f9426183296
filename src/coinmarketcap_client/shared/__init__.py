"""Models shared across the client layers."""

"""Host integrations for the line editor session."""

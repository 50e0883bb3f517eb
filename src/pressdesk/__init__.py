"""PressDesk dashboard read-model service."""

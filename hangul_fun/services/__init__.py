"""Collaborators around the domain layer: settings, lyrics selection, conversations."""

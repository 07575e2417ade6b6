"""Test doubles for the game's external collaborators."""

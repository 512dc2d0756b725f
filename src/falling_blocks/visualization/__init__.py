"""Pygame front end for the falling-block game."""

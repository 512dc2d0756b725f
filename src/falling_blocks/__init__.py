"""Falling-block puzzle game package."""

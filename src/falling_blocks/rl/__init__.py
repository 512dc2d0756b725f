"""Reinforcement-learning helpers for the falling-block game."""

"""Cho Dai Di (Big Two) rules engine and terminal game."""

__version__ = "0.1.0"

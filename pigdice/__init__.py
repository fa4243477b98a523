"""Pig Dice - a two-player push-your-luck dice game for the console."""

__version__ = "0.1.0"

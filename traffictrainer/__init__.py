"""Headless driving-trainer logic: game states and session flow, car model, player and menu helpers."""

__version__ = "0.1.0"
"""Tick-driven handlers for organising a pygame game loop: scenes, game
objects, cameras, events, input, windowing and drawing."""

__version__ = "0.1.0"
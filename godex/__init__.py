"""Godex - a terminal Pokedex backed by PokeAPI."""

__version__ = "1.0.0"

"""Śląski Słownik Majsterkowy: Silesian-Polish technical dictionary backend."""

__version__ = "1.0.0"

"""Data structures, design patterns, vector maths, noise, threading helpers and framed TCP messaging."""

__version__ = "0.1.0"
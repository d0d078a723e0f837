"""Read species data, text and pictures from first-generation Game Boy monster ROM images."""

__version__ = "0.1.0"
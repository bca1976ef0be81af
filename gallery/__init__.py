"""Folder gallery: image uploads organized into folders with a single active folder."""

__version__ = "1.0.0"

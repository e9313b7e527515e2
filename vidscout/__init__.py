"""Find the media behind video and image pages and download it."""

__version__ = "0.1.0"
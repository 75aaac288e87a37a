"""podcards - render podcast episode data into a page of episode cards."""

__version__ = "0.1.0"

"""Daily mood- and question-weighted card draws."""

__version__ = "0.1.0"

"""Portal Link - link-in-bio pages with ordered outbound links."""

__version__ = "0.1.0"

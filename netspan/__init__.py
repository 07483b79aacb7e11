"""Networks of computers, their minimum spanning trees, and paths through them."""

__version__ = "0.1.0"
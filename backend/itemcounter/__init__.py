"""Item Counter: typed occurrence counting over user-supplied lists."""

__version__ = "1.0.0"

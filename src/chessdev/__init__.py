"""Chess rules engine with a line-oriented human-vs-CPU command interface."""

__version__ = "0.1.0"

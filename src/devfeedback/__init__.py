"""Developer Feedback Loop - record developers and the feedback given to them."""

__version__ = "0.1.0"

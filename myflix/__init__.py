"""myFlix: movie catalog REST API with user favorites and to-watch lists."""

__version__ = "1.0.0"

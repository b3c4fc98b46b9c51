"""ChatMock — mock chat completion server with upstream provider routing."""

__version__ = "0.1.0"

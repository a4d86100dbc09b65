"""structgen - Go struct generator for MySQL schemas."""

__version__ = "0.1.0"

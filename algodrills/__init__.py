"""Classic algorithm drills grouped by technique, with a command-line front end."""

__version__ = "0.1.0"
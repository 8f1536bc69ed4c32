"""File parsers and report writers."""

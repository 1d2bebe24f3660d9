"""Reading and writing maze levels."""

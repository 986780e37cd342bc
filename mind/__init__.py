"""mind: a terminal code-breaking game."""

"""Glue around the pure lambda calculus front end: error reporting, sessions and the interactive shell."""

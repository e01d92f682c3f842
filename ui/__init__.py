"""Rendering and input front-end for the checkers engine."""

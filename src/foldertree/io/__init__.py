"""Input/output helpers for rendered trees."""

"""Core roster, layout and coordinate logic."""

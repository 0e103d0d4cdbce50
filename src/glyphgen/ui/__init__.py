"""User interfaces for glyphgen."""

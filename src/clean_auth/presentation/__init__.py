"""Presentation Layer - CLI and HTTP display surfaces."""

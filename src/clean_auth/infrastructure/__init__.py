"""Infrastructure Layer - auth backends and other external adapters."""

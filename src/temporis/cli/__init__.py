"""Command line surface for temporis."""

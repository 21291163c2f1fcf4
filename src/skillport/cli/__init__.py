"""Command line interface for Skillport."""

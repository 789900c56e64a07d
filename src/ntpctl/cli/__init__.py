"""Command line interface for ntpctl."""

"""Command-line interface for specchat."""

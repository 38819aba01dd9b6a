"""Command-line interface for ledgerload."""

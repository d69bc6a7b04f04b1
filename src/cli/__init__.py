"""Command-line interface for the Reading Locator."""

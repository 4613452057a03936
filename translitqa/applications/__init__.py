"""Entry points for running the case table."""

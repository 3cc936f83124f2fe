"""Command-line interface for ctxgen."""

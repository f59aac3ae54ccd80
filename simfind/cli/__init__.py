"""Command-line interface for simfind."""

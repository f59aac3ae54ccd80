"""Entry point for python -m simfind."""

from .cli.main import cli

if __name__ == "__main__":
    cli()

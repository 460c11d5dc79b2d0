"""Main CLI entry point."""

from styled_term.config.logging import setup_logging


def main() -> None:
    """Main CLI entry point."""
    from styled_term.cli.app import create_app

    setup_logging()
    app = create_app()
    app()


if __name__ == "__main__":
    main()

"""Entry point for ``python -m docs_quality``."""

if __name__ == "__main__":
    from docs_quality.cli.app import main

    main()

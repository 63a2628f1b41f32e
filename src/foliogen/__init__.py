def main() -> None:
    """Entry point for the application: serve the API."""
    from foliogen.api.main import main as api_main

    api_main()

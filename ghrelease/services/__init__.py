"""Services that talk to the release API on behalf of the CLI."""

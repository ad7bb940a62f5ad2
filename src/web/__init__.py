"""DevKB REST API."""

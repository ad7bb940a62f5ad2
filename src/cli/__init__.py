"""DevKB command-line tool."""

"""gitkit command line."""

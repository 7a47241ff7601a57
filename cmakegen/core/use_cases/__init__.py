"""Use cases — orchestrate config, pipeline and I/O for the CLI."""

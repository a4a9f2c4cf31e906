"""Sub-commands, one module per command."""

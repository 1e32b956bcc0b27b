"""CLI commands: generate, plan, clean."""

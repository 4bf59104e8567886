"""Runtime settings and logging setup for timetype."""

"""External integrations behind ABCs: GitHub CLI, program version probes and the clock."""

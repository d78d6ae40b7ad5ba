"""Natural-language questions answered with generated, read-only SQL."""

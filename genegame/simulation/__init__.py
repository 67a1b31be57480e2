"""Round driver, population seeding and diagnostics."""

"""Calculator version, stamped on every calculated row as calculator_version."""

VERSION = "2026.10.18"

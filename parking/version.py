"""Calculator version, stamped on every receipt table."""

VERSION = "2026.10.18"

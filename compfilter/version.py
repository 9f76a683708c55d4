"""Package version."""

VERSION = "0.4.0"

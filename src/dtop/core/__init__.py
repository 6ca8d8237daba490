"""Core functionality: entry rendering and registry lookups."""

"""Routing profiles, feature flags and parameter variants."""

"""Core configuration, logging and verification logic."""

"""Core infrastructure: config, logging, errors, authorization."""

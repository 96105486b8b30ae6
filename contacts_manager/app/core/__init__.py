"""Configuration, logging, persistence helpers, errors and validation rules."""

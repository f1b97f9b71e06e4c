"""Core tasktrack functionality: task models, persistence and configuration."""

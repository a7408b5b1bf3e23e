"""Kida environment setup for perch."""

from perch.templating.integration import create_environment

__all__ = ["create_environment"]

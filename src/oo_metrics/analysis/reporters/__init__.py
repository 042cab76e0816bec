"""Reporters for object-oriented design metrics output."""

from .console import ConsoleReporter

__all__ = ["ConsoleReporter"]

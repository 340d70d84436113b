"""Terminal host for the comment tree widget."""

from .session import ConsoleSession
from .surface import ConsoleDisplaySurface

__all__ = ["ConsoleDisplaySurface", "ConsoleSession"]

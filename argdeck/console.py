# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argdeck help output."""
from rich.console import Console

console = Console()

# sessh CLI helpers

import sys
from typing import Optional


def prompt_input(prompt: str) -> Optional[str]:
    """
    Prompt for one line of input.

    Args:
        prompt: Text shown before the cursor

    Returns:
        Stripped input, or None on EOF / Ctrl-C
    """
    try:
        value = input(prompt)
    except (EOFError, KeyboardInterrupt):
        print()
        return None
    return value.strip()


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)

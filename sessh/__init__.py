# sessh: pick a remote host and connect over ssh
# License: MIT

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_local_version() -> str:
    """Read fallback version from local pyproject.toml."""
    try:
        root = Path(__file__).resolve().parents[1]
        pyproject = root / "pyproject.toml"
        text = pyproject.read_text(encoding="utf-8")
        match = re.search(r'^version\s*=\s*"([^"]+)"', text, flags=re.MULTILINE)
        if match:
            return match.group(1)
    except OSError:
        pass
    return "0.0.0-dev"


try:
    __version__ = version("sessh")
except PackageNotFoundError:
    __version__ = _read_local_version()


def main(args: list[str]) -> int:
    """Entry point for sessh command."""
    from .main import main as sessh_main
    return sessh_main(["sessh"] + list(args))

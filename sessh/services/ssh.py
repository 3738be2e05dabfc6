# sessh SSH service
# Hands the resolved target to the system ssh program

import subprocess
from typing import Callable, List, Optional, Sequence

from ..core.errors import LaunchError
from ..core.event_log import NullLogger
from ..core.interpreter import strip_ssh_prefix
from ..core.session_store import SessionStore


class SSHLauncher:
    """
    Launch an interactive ssh session.

    Uses the system ssh command; the session inherits the terminal.
    """

    def __init__(
        self,
        binary: str = "ssh",
        extra_args: Optional[Sequence[str]] = None,
        store: Optional[SessionStore] = None,
        remember_username: bool = True,
        ask_username: Optional[Callable[[str], Optional[str]]] = None,
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
        logger=None,
    ):
        """
        Initialize the launcher.

        Args:
            binary: ssh program to run
            extra_args: Arguments placed before the target
            store: History that receives user@host after a username prompt
            remember_username: Whether to store user@host at all
            ask_username: Prompt used for bare hosts, defaults to stdin
            runner: subprocess.run compatible callable
            logger: Event logger
        """
        self.binary = binary
        self.extra_args = list(extra_args or [])
        self.store = store
        self.remember_username = remember_username
        self.ask_username = ask_username or self._ask_username
        self.runner = runner or subprocess.run
        self.logger = logger or NullLogger()

    @staticmethod
    def _ask_username(host: str) -> Optional[str]:
        from ..cli_utils import prompt_input
        return prompt_input(f"Enter username to login {host} :\n")

    def complete_target(self, target: str) -> str:
        """
        Return user@host for target, asking for a username if needed.

        An empty answer keeps the bare host so ssh falls back to its own
        default user.
        """
        target = strip_ssh_prefix(target)
        if not target or "@" in target:
            return target

        username = self.ask_username(target)
        if not username:
            return target

        full = f"{username}@{target}"
        if self.store is not None and self.remember_username:
            if full not in self.store.load():
                self.store.append(full)
                self.logger.write("session_added", entry=full)
        return full

    def build_args(self, target: str) -> List[str]:
        """Build ssh command arguments."""
        return [self.binary, *self.extra_args, target]

    def launch(self, target: str) -> int:
        """
        Open an interactive session to target.

        Returns:
            Process exit code; 0 without running anything when the
            target is empty

        Raises:
            LaunchError: if the ssh program cannot be started
        """
        target = self.complete_target(target)
        if not target:
            return 0

        args = self.build_args(target)
        self.logger.write("launch_start", target=target, args=args)
        try:
            result = self.runner(args)
        except FileNotFoundError as e:
            self.logger.write("error", target=target, message=str(e))
            raise LaunchError(f"{self.binary} not found; is an OpenSSH client installed?") from e
        self.logger.write("launch_end", target=target, exit_code=result.returncode)
        return result.returncode

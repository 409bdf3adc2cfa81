import os
import sys
from io import StringIO
from subprocess import PIPE, Popen
from typing import Optional

from git import Repo

DEFAULT_PAGER = 'less -FRSX'


def pager_command(repo: Optional[Repo] = None) -> str:
    """Pager to use, in git's precedence order: $GIT_PAGER, core.pager, $PAGER, then less."""
    cmd = os.environ.get('GIT_PAGER')
    if cmd:
        return cmd
    if repo is not None:
        cmd = repo.config_reader().get_value('core', 'pager', default='')
        if cmd:
            return str(cmd)
    return os.environ.get('PAGER') or DEFAULT_PAGER


class Pager:
    """Context manager for paging output through less or similar."""

    def __init__(self, use_pager: str = 'auto', command: str = DEFAULT_PAGER):
        """Initialize pager settings.

        Args:
            use_pager: 'always', 'never', or 'auto' (default)
            command: shell command the buffered output is piped to
        """
        self.use_pager = use_pager
        self.command = command
        self.original_stdout = None
        self.buffer = None

    def should_page(self) -> bool:
        if self.use_pager == 'always':
            return True
        elif self.use_pager == 'never':
            return False
        else:  # auto
            return sys.stdout.isatty()

    def __enter__(self):
        """Start capturing output for potential paging."""
        if self.should_page():
            self.original_stdout = sys.stdout
            self.buffer = StringIO()
            sys.stdout = self.buffer
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Send captured output through the pager, if it's taller than the terminal."""
        if not self.original_stdout:
            return
        sys.stdout = self.original_stdout
        output = self.buffer.getvalue()
        try:
            terminal_height = int(os.environ.get('LINES', 24))
        except ValueError:
            terminal_height = 24
        # Leave room for the prompt
        if output.count('\n') <= terminal_height - 2:
            print(output, end='')
            return
        try:
            pager = Popen(self.command, shell=True, stdin=PIPE, text=True)
            pager.communicate(output)
        except OSError:
            print(output, end='')

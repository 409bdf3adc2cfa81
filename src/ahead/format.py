"""Line formatting for repository status and commit rows."""

from typing import Iterable

from .color import paint
from .repo import RepoState
from .walk import WalkEntry

SHORT_ID_LEN = 7


def short_id(hexsha: str) -> str:
    """Abbreviated commit id, for display only (not disambiguated)."""
    return hexsha[:SHORT_ID_LEN]


def first_line(message: str | bytes) -> str:
    """First line of a commit message; bytes are decoded as UTF-8, replacing invalid sequences."""
    if isinstance(message, bytes):
        message = message.decode('utf-8', errors='replace')
    return message.split('\n', 1)[0].rstrip('\r')


def format_state(state: RepoState, use_color: bool = False) -> str:
    return f"{paint('State:', 'green', use_color)}   {state.value}"


def format_branch(shorthand: str) -> str:
    return f"On {shorthand}"


def format_remotes(names: Iterable[str], use_color: bool = False) -> str:
    return f"{paint('Remotes:', 'green', use_color)} {', '.join(names)}"


def format_entry(entry: WalkEntry, use_color: bool = False) -> str:
    """`<short id> <subject>`, or a placeholder if the commit couldn't be read."""
    sha = paint(short_id(entry.hexsha), 'yellow', use_color)
    if entry.commit is None:
        return f"{sha} <unreadable commit: {entry.error}>"
    return f"{sha} {first_line(entry.commit.message)}"

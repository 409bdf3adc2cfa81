"""git-ahead: show the commits on HEAD that aren't on its upstream branch."""

__version__ = "0.1.0"

from .branch import resolve_baseline_branch
from .cli import cli
from .color import should_use_color
from .format import first_line, format_entry, short_id
from .pager import Pager, pager_command
from .repo import RepoState, head_shorthand, open_repo, remote_names, repo_state
from .walk import UnbornHeadError, WalkEntry, compute_divergence, walk_head

__all__ = [
    "cli",
    "compute_divergence",
    "first_line",
    "format_entry",
    "head_shorthand",
    "open_repo",
    "Pager",
    "pager_command",
    "remote_names",
    "repo_state",
    "RepoState",
    "resolve_baseline_branch",
    "short_id",
    "should_use_color",
    "UnbornHeadError",
    "walk_head",
    "WalkEntry",
]

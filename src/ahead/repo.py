from enum import Enum
from pathlib import Path

from git import Repo


class RepoState(Enum):
    """Operational state of a repository, as git's own marker files describe it."""
    CLEAN = 'Clean'
    MERGE = 'Merge'
    REVERT = 'Revert'
    REVERT_SEQUENCE = 'RevertSequence'
    CHERRY_PICK = 'CherryPick'
    CHERRY_PICK_SEQUENCE = 'CherryPickSequence'
    BISECT = 'Bisect'
    REBASE = 'Rebase'
    REBASE_INTERACTIVE = 'RebaseInteractive'
    REBASE_MERGE = 'RebaseMerge'
    APPLY_MAILBOX = 'ApplyMailbox'
    APPLY_MAILBOX_OR_REBASE = 'ApplyMailboxOrRebase'


# Marker path (relative to the git dir) -> state; first match wins
STATE_MARKERS = [
    ('rebase-merge/interactive', RepoState.REBASE_INTERACTIVE),
    ('rebase-merge', RepoState.REBASE_MERGE),
    ('rebase-apply/rebasing', RepoState.REBASE),
    ('rebase-apply/applying', RepoState.APPLY_MAILBOX),
    ('rebase-apply', RepoState.APPLY_MAILBOX_OR_REBASE),
    ('MERGE_HEAD', RepoState.MERGE),
    ('REVERT_HEAD', RepoState.REVERT),
    ('CHERRY_PICK_HEAD', RepoState.CHERRY_PICK),
    ('BISECT_LOG', RepoState.BISECT),
]

SEQUENCES = {
    RepoState.REVERT: RepoState.REVERT_SEQUENCE,
    RepoState.CHERRY_PICK: RepoState.CHERRY_PICK_SEQUENCE,
}


def open_repo(path: str | Path) -> Repo:
    """Open the repository rooted exactly at `path` (parent directories are not searched).

    Raises `git.InvalidGitRepositoryError` / `git.NoSuchPathError` when there is none.
    """
    return Repo(path, search_parent_directories=False)


def repo_state(repo: Repo) -> RepoState:
    """Determine whether a merge, rebase, cherry-pick, etc. is in progress."""
    git_dir = Path(repo.git_dir)
    for marker, state in STATE_MARKERS:
        if (git_dir / marker).exists():
            if state in SEQUENCES and (git_dir / 'sequencer' / 'todo').exists():
                return SEQUENCES[state]
            return state
    return RepoState.CLEAN


def head_shorthand(repo: Repo) -> str:
    """Short name of the branch HEAD points to.

    Returns 'HEAD' when HEAD is detached, unborn, or otherwise unresolvable.
    """
    head = repo.head
    try:
        if not head.is_valid():
            return 'HEAD'
        return head.reference.name
    except (TypeError, ValueError):
        # TypeError: detached; ValueError: missing ref
        return 'HEAD'


def remote_names(repo: Repo) -> list[str]:
    """Names of configured remotes, in config order."""
    return [remote.name for remote in repo.remotes]

from functools import partial
from typing import Callable, Optional

from git import Repo, SymbolicReference
from utz import err

REMOTES = ('origin', 'upstream')
HEADS = ('master', 'main')
DEFAULT_BRANCH = 'master'

Resolver = Callable[[Repo], Optional[str]]


def remote_head(repo: Repo, remote: str) -> Optional[str]:
    """Shorthand of the branch `refs/remotes/<remote>/HEAD` points to (e.g. 'origin/main').

    Returns None if the symbolic ref doesn't exist.
    """
    ref = SymbolicReference(repo, f'refs/remotes/{remote}/HEAD')
    try:
        return ref.reference.name
    except TypeError:
        # Not symbolic; it names itself
        return f'{remote}/HEAD'
    except ValueError:
        return None


def local_head(repo: Repo, name: str) -> Optional[str]:
    """`name` if `refs/heads/<name>` exists, else None."""
    return name if name in repo.heads else None


def prefer_remote(remote: Optional[str]) -> tuple[str, ...]:
    """`REMOTES`, with `remote` (if given) moved to the front."""
    if not remote:
        return REMOTES
    return (remote, *[r for r in REMOTES if r != remote])


def candidates(
    remotes: tuple[str, ...] = REMOTES,
    heads: tuple[str, ...] = HEADS,
) -> list[tuple[str, Resolver]]:
    """Ordered `(label, resolve_fn)` pairs tried by `resolve_baseline_branch`."""
    return [
        *[(f'refs/remotes/{remote}/HEAD', partial(remote_head, remote=remote)) for remote in remotes],
        *[(f'refs/heads/{head}', partial(local_head, name=head)) for head in heads],
    ]


def resolve_baseline_branch(
    repo: Repo,
    remotes: tuple[str, ...] = REMOTES,
    heads: tuple[str, ...] = HEADS,
    verbose: bool = False,
) -> str:
    """Guess the branch to compare HEAD against.

    Tries each remote's symbolic HEAD, then each local branch, in order; the
    first one found wins. Falls back to 'master', which may not exist: callers
    resolving the returned name must handle that.
    """
    for label, resolve in candidates(remotes, heads):
        name = resolve(repo)
        if name:
            if verbose:
                err(f"Baseline: {name} (from {label})")
            return name
        if verbose:
            err(f"No {label}")
    if verbose:
        err(f"Baseline: {DEFAULT_BRANCH} (default)")
    return DEFAULT_BRANCH

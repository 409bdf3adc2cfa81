"""Commit-graph walks: everything reachable from one point, minus everything reachable from another."""

from dataclasses import dataclass
from typing import Iterator, Optional

from git import Commit, Repo
from git.exc import BadObject


class UnbornHeadError(Exception):
    """HEAD doesn't point at a commit (empty repository, or a missing branch ref)."""


# Errors raised by GitPython when a commit object can't be read
LOOKUP_ERRORS = (BadObject, ValueError)


@dataclass
class WalkEntry:
    """One visited commit id, with either the loaded commit or the error loading it."""
    hexsha: str
    commit: Optional[Commit] = None
    error: Optional[Exception] = None


def load_entry(commit: Commit) -> WalkEntry:
    """Read `commit`'s object, capturing a failure instead of raising it."""
    try:
        # Attribute access triggers the object read
        commit.message
    except LOOKUP_ERRORS as e:
        return WalkEntry(commit.hexsha, error=e)
    return WalkEntry(commit.hexsha, commit=commit)


def head_commit(repo: Repo) -> Commit:
    """Commit HEAD resolves to, following symbolic refs."""
    head = repo.head
    if not head.is_valid():
        raise UnbornHeadError(f"HEAD does not point at a commit in {repo.working_dir}")
    return head.commit


def walk(
    repo: Repo,
    include: Commit,
    exclude: Optional[Commit] = None,
    max_count: Optional[int] = None,
) -> Iterator[WalkEntry]:
    """Lazily visit commits reachable from `include`, skipping `exclude` and its ancestors.

    Order is by commit time, newest first (`git rev-list` without `--topo-order`).
    `max_count` stops `rev-list` after that many commits.
    """
    rev = f'{exclude.hexsha}..{include.hexsha}' if exclude is not None else include.hexsha
    kwargs = {} if max_count is None else dict(max_count=max_count)
    for commit in repo.iter_commits(rev, **kwargs):
        yield load_entry(commit)


def walk_head(repo: Repo, max_count: Optional[int] = None) -> Iterator[WalkEntry]:
    """Every commit reachable from HEAD (at most `max_count` of them, if given)."""
    return walk(repo, head_commit(repo), max_count=max_count)


def compute_divergence(repo: Repo, baseline_name: str) -> Iterator[WalkEntry]:
    """Commits reachable from HEAD but not from `baseline_name`.

    `baseline_name` is any revision `git rev-parse` accepts. If it doesn't
    resolve, the error (e.g. `gitdb.exc.BadName`) propagates: an explicit
    baseline must never be silently replaced.

    Raises `UnbornHeadError` if HEAD has no commit.
    """
    if not baseline_name:
        raise ValueError("Empty baseline revision")
    baseline = repo.rev_parse(baseline_name)
    while baseline.type == 'tag':
        baseline = baseline.object
    head = head_commit(repo)
    return walk(repo, head, baseline)

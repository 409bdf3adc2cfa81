#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "click",
#     "GitPython",
#     "utz",
# ]
# ///
"""Show what's new on the current branch - commits ahead of its upstream.

Run inside a repository:
    git-ahead

prints the repository state, the current branch, and every commit reachable
from HEAD but not from a baseline branch. The baseline is guessed (the remote
HEAD of "origin" or "upstream", else a local "master" or "main"), or given
explicitly:
    git-ahead --origin-branch origin/release show

An explicit baseline that doesn't resolve is an error; it is never replaced by
a guess.

    git-ahead log -n 20

prints state, branch, remotes, and the most recent commits on HEAD.
"""

import sys
from pathlib import Path

from click import Choice, IntRange, echo, group, pass_context, pass_obj
from git.exc import BadName, GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from utz import err
from utz.cli import flag, opt

from .branch import prefer_remote, resolve_baseline_branch
from .color import COLOR_MODES, should_use_color
from .format import format_branch, format_entry, format_remotes, format_state
from .pager import Pager, pager_command
from .repo import head_shorthand, open_repo, remote_names, repo_state
from .walk import UnbornHeadError, compute_divergence, walk_head


color_opt = opt('-c', '--color', type=Choice(COLOR_MODES), default='auto', help='When to use colored output (default: auto)')
pager_opt = opt('--pager', type=Choice(['auto', 'always', 'never']), default='auto', help='When to use pager (default: auto)')
verbose_flag = flag('-v', '--verbose', help='Log baseline-branch resolution to stderr')


def common_opts(func):
    """Apply output options shared by all commands."""
    func = color_opt(func)
    func = pager_opt(func)
    func = verbose_flag(func)
    return func


def open_cwd_repo():
    """Open the repository in the current directory, or exit."""
    try:
        path = Path.cwd()
    except OSError as e:
        err(f"Cannot find current directory. Giving up: {e}")
        sys.exit(1)
    try:
        return open_repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        err(f"No git repo found at {path}: {e}")
        sys.exit(1)


def print_status(repo, use_color: bool) -> None:
    echo(format_state(repo_state(repo), use_color), color=use_color)
    echo(format_branch(head_shorthand(repo)))


def print_entries(entries, use_color: bool) -> None:
    try:
        for entry in entries:
            echo(format_entry(entry, use_color), color=use_color)
    except GitCommandError as e:
        err(f"Error walking commits: {e.stderr.strip() or e}")
        sys.exit(1)


@group(invoke_without_command=True)
@opt('--origin-branch', '--default-branch', 'origin_branch', help='Branch to compare against (default: guessed from remotes and local branches)')
@opt('--remote', help='Remote whose HEAD is tried first when guessing the baseline branch')
@common_opts
@pass_context
def cli(ctx, origin_branch: str | None, remote: str | None, color: str, pager: str, verbose: bool) -> None:
    """Show commits on HEAD that aren't on a baseline branch.

    Runs `show` when no command is given.
    """
    ctx.obj = dict(
        origin_branch=origin_branch,
        remote=remote,
        color=color,
        pager=pager,
        verbose=verbose,
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(show)


@cli.command()
@pass_obj
def show(obj: dict) -> None:
    """Print repository status and the commits ahead of the baseline branch."""
    # Determine color BEFORE pager redirects stdout
    use_color = should_use_color(obj['color'])
    repo = open_cwd_repo()

    origin_branch = obj['origin_branch']
    if origin_branch is None:
        remotes = prefer_remote(obj['remote'])
        origin_branch = resolve_baseline_branch(repo, remotes=remotes, verbose=obj['verbose'])

    with Pager(obj['pager'], pager_command(repo)):
        print_status(repo, use_color)
        try:
            entries = compute_divergence(repo, origin_branch)
        except (BadName, ValueError) as e:
            err(f"Cannot resolve baseline branch {origin_branch!r}: {e}")
            sys.exit(1)
        except UnbornHeadError as e:
            err(str(e))
            sys.exit(1)
        print_entries(entries, use_color)


@cli.command()
@opt('-n', '--max-count', type=IntRange(min=0), help='Show at most this many commits')
@pass_obj
def log(obj: dict, max_count: int | None) -> None:
    """Print repository status, remotes, and the commits reachable from HEAD."""
    use_color = should_use_color(obj['color'])
    repo = open_cwd_repo()

    with Pager(obj['pager'], pager_command(repo)):
        print_status(repo, use_color)
        echo(format_remotes(remote_names(repo), use_color), color=use_color)
        try:
            entries = walk_head(repo, max_count=max_count)
        except UnbornHeadError as e:
            err(str(e))
            sys.exit(1)
        print_entries(entries, use_color)


@cli.command(name='prev')
def prev_() -> None:
    """Not implemented."""
    open_cwd_repo()
    echo("Not implemented")


@cli.command(name='next')
def next_() -> None:
    """Not implemented."""
    open_cwd_repo()
    echo("Not implemented")


if __name__ == '__main__':
    cli()

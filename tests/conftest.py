from pathlib import Path
from unittest.mock import patch

import pytest
from git import Actor, Repo
from git.db import GitCmdObjectDB
from git.exc import BadObject
from git.util import bin_to_hex

AUTHOR = Actor('Test', 'test@example.com')
EPOCH = 1_600_000_000


class RepoBuilder:
    """Build commits with fixed, increasing timestamps."""

    def __init__(self, path: Path):
        self.repo = Repo.init(path)
        # Independent of the user's init.defaultBranch
        self.repo.git.symbolic_ref('HEAD', 'refs/heads/work')
        self.time = EPOCH

    def commit(self, message: str):
        self.time += 60
        date = f'{self.time} +0000'
        return self.repo.index.commit(
            message,
            author=AUTHOR,
            committer=AUTHOR,
            author_date=date,
            commit_date=date,
        )

    def branch(self, name: str, commit):
        return self.repo.create_head(name, commit)

    def checkout(self, name: str):
        """Point HEAD at branch `name` (commits are empty, so there's no worktree to update)."""
        self.repo.head.reference = self.repo.heads[name]

    def remote_head(self, remote: str, branch: str, commit):
        """Create `refs/remotes/<remote>/<branch>` and a symbolic `<remote>/HEAD` pointing at it."""
        self.repo.git.update_ref(f'refs/remotes/{remote}/{branch}', commit.hexsha)
        self.repo.git.symbolic_ref(f'refs/remotes/{remote}/HEAD', f'refs/remotes/{remote}/{branch}')


@pytest.fixture
def builder(tmp_path):
    return RepoBuilder(tmp_path / 'repo')


@pytest.fixture
def unreadable():
    """Make reading the given commit ids fail, as for a missing or corrupt object."""
    def unreadable(*hexshas):
        stream = GitCmdObjectDB.stream

        def fail(odb, binsha):
            if bin_to_hex(binsha).decode() in hexshas:
                raise BadObject(binsha)
            return stream(odb, binsha)
        return patch.object(GitCmdObjectDB, 'stream', autospec=True, side_effect=fail)
    return unreadable

from __future__ import annotations
from dataclasses import dataclass
import re
import structlog

log = structlog.get_logger(__name__)

#: Index-side (X) status codes counted as changes staged for commit
RECORDED_IN_INDEX = frozenset("MADRC")

#: Worktree-side (Y) status codes counted as unstaged changes
MODIFIED_IN_WORK_TREE = frozenset("MAUD")

AHEAD_RGX = re.compile(r"\[ahead (\d+)")
BEHIND_RGX = re.compile(r"behind (\d+)\]")

# Branch name runs up to the upstream separator ("...") or the first space
BRANCH_RGX = re.compile(r"(.+?)(?=\.\.\.| |$)")

LINE_SPLIT_RGX = re.compile(r"\n|\r")


@dataclass
class StatusResult:
    #: Number of entries with changes recorded in the index
    added: int = 0

    #: Number of entries with changes in the working tree that are not in the
    #: index
    modified: int = 0

    #: Number of untracked entries (status code ``??``)
    untracked: int = 0

    #: The number of commits by which the branch is ahead of its upstream
    ahead: int = 0

    #: The number of commits by which the branch is behind its upstream
    behind: int = 0

    #: Name of the current branch; `None` if ``HEAD`` is detached, the
    #: repository has no commits yet, or the header could not be read
    branch: str | None = None

    #: `True` iff the branch is both ahead of and behind its upstream
    diverged: bool = False


def parse_status(
    raw_status: str, detached: bool = False, init: bool = False
) -> StatusResult:
    """
    Parse the output of ``git status --porcelain --branch`` into a
    `StatusResult`.

    The first line is taken to be the ``## branch...upstream [ahead N, behind
    M]`` header; every other line is an ``XY path`` entry, where ``X`` is the
    status of the index and ``Y`` is the status of the working tree.  Branch
    & upstream information is only read when ``HEAD`` is neither detached nor
    unborn (``init``).

    Malformed input never raises; whatever cannot be parsed is left at its
    zero value.
    """
    lines = LINE_SPLIT_RGX.split(raw_status)
    header = lines[0][3:]
    result = StatusResult()

    if not detached and not init:
        if m := AHEAD_RGX.search(header):
            result.ahead = int(m[1])
        if m := BEHIND_RGX.search(header):
            result.behind = int(m[1])
        if m := BRANCH_RGX.match(header):
            result.branch = m[1]

    # See <https://git-scm.com/docs/git-status#_short_format>.  For paths with
    # merge conflicts, X and Y are the states of each side of the merge.
    for line in lines[1:]:
        xy = line[:2].ljust(2)
        if xy == "??":
            result.untracked += 1
        else:
            if xy[0] in RECORDED_IN_INDEX:
                result.added += 1
            if xy[1] in MODIFIED_IN_WORK_TREE:
                result.modified += 1

    result.diverged = result.ahead > 0 and result.behind > 0
    log.debug(
        "Parsed git status",
        branch=result.branch,
        ahead=result.ahead,
        behind=result.behind,
        added=result.added,
        modified=result.modified,
        untracked=result.untracked,
    )
    return result

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
import os
import structlog
from .config import Config
from .path import abbreviate
from .status import parse_status
from .styles import Painter
from .styles import StyleClass as SC

log = structlog.get_logger(__name__)

#: Value of the commit hash when the repository has no commits yet
#: (``git rev-parse HEAD`` echoes the name back)
INIT_HASH = "HEAD"

#: Value of the git flag meaning that the shell is inside a ``.git``
#: directory, where git information is not shown
IN_GIT_DIR = "."


@dataclass
class PromptArgs:
    """
    Raw values collected by the calling shell for a single prompt render.
    Everything is optional; missing git inputs are treated as empty.
    """

    #: Git integration signal: unset/empty or ``"."`` disables git output
    git: str | None = None

    #: Contents of ``.git/HEAD``
    head: str | None = None

    #: Output of ``git rev-parse HEAD``
    hash: str | None = None

    #: Output of ``git status --porcelain --branch``
    status: str | None = None

    #: Non-empty when ``.git/BISECT_LOG`` exists
    bisect_log: str | None = None

    #: Contents of ``.git/MERGE_HEAD``, if any
    merge_head: str | None = None

    #: Output of ``git name-rev --name-only HEAD``, if wanted
    namerev: str | None = None

    host: str | None = None
    user: str | None = None


@dataclass
class PromptData:
    #: The current working directory, relative to :envvar:`HOME` if possible
    #: and shortened to at most `Config.path_length` segments
    path: str

    #: Whether git information is shown
    git: bool = False

    host: str | None = None
    user: str | None = None

    #: Name of the current branch; `None` when detached or in a repository
    #: without commits
    branch: str | None = None

    #: Commit hash truncated to `Config.hash_length`; `None` without git
    hash: str | None = None

    #: The number of commits by which the branch is ahead of its upstream; 0
    #: when detached, without commits, or without an upstream
    ahead: int = 0

    #: The number of commits by which the branch is behind its upstream
    behind: int = 0

    #: `True` iff the branch is both ahead of and behind its upstream
    diverged: bool = False

    #: Number of paths with changes staged in the index
    added: int = 0

    #: Number of paths with unstaged changes in the working tree
    modified: int = 0

    #: Number of untracked paths
    untracked: int = 0

    #: `True` iff ``HEAD`` is not a symbolic ref or a bisection is in progress
    detached: bool = False

    #: `True` iff the repository has no commits yet
    init: bool = False

    #: Contents of ``MERGE_HEAD`` while a merge is in progress
    merging: str | None = None

    #: Name to show instead of the hash when ``HEAD`` is detached, such as the
    #: output of ``git name-rev``
    namerev: str | None = None

    @classmethod
    def assemble(
        cls,
        args: PromptArgs,
        config: Config,
        env: Mapping[str, str] | None = None,
    ) -> PromptData:
        if env is None:
            env = os.environ
        # Prefer $PWD to os.getcwd() as the former does not resolve symlinks
        cwd = env.get("PWD") or os.getcwd()
        data = cls(
            path=abbreviate(cwd, env.get("HOME", ""), config.path_length),
            git=bool(args.git) and args.git != IN_GIT_DIR,
            host=args.host,
            user=args.user,
        )
        if data.git:
            commit = args.hash or ""
            data.namerev = args.namerev or None
            data.init = commit == INIT_HASH
            # .git/HEAD holds a bare hash instead of a ref when detached.
            # An active bisection counts as detached even on a branch.
            data.detached = not (args.head or "").startswith("ref: ") or bool(
                args.bisect_log
            )
            data.merging = args.merge_head or None
            status = parse_status(
                args.status or "", detached=data.detached, init=data.init
            )
            data.branch = status.branch
            data.ahead = status.ahead
            data.behind = status.behind
            data.diverged = status.diverged
            data.added = status.added
            data.modified = status.modified
            data.untracked = status.untracked
            data.hash = commit[: config.hash_length]
        log.debug(
            "Assembled prompt data",
            path=data.path,
            git=data.git,
            detached=data.detached,
            init=data.init,
            merging=data.merging is not None,
        )
        return data

    def display(self, paint: Painter) -> str:
        """
        Construct & return a complete prompt string from the data
        """

        ps1 = ""

        if self.user:
            ps1 += paint(self.user, SC.USER) + "@"

        if self.host:
            ps1 += paint(self.host, SC.HOST) + ":"

        ps1 += paint(self.path, SC.CWD)

        if self.git:
            ps1 += self.display_git(paint)

        # The actual prompt symbol at the end of the prompt:
        ps1 += paint.styler.prompt_suffix + " "

        return ps1

    def display_git(self, paint: Painter) -> str:
        # Start building the status string with the separator:
        p = "@"
        if self.init:
            # No commits yet, so no hash and no branch to speak of:
            p += paint("init", SC.GIT_INIT)
        elif self.detached:
            p += paint(self.namerev or self.hash or "", SC.GIT_DETACHED)
        else:
            p += paint(self.branch or "", SC.GIT_BRANCH)
            if self.hash:
                p += paint("#" + self.hash, SC.GIT_HASH)
        if self.ahead:
            # Show commits ahead of upstream:
            p += paint(
                f"↑{self.ahead}", SC.GIT_DIVERGED if self.diverged else SC.GIT_AHEAD
            )
        if self.behind:
            # Show commits behind upstream:
            p += paint(
                f"↓{self.behind}", SC.GIT_DIVERGED if self.diverged else SC.GIT_BEHIND
            )
        if self.added:
            p += paint(f"+{self.added}", SC.GIT_ADDED)
        if self.modified:
            p += paint(f"~{self.modified}", SC.GIT_MODIFIED)
        if self.untracked:
            p += paint(f"?{self.untracked}", SC.GIT_UNTRACKED)
        if self.merging:
            p += paint("[MERGE]", SC.GIT_MERGING)
        return p

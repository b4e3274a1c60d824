"""
Git-aware bash/zsh prompt renderer

``pyprompt`` turns the current directory plus precomputed Git output (the
contents of ``.git/HEAD``, ``git rev-parse HEAD``, and ``git status
--porcelain --branch``) into a colored PS1 string.  The shell collects the Git
information and passes it in, so the script itself never runs Git.

Features:

- Shows the current directory relative to ``$HOME``, keeping only the last few
  path components
- Shows the current branch & abbreviated commit hash, or the commit (or a
  ``git name-rev`` name) when ``HEAD`` is detached
- Shows commits ahead of & behind the upstream branch
- Counts staged, modified, and untracked files
- Flags repositories without commits and merges in progress
- Supports both Bash and zsh, with dark and light color themes
"""

__version__ = "0.1.0"
__license__ = "MIT"

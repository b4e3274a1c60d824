from __future__ import annotations
import argparse
from pathlib import Path
import sys
import structlog
from . import __version__
from .config import Config, ConfigError, default_config_path
from .info import PromptArgs, PromptData
from .log import configure_logging, debug_requested
from .styles import THEMES, ANSIStyler, BashStyler, Painter, PlainStyler, ZshStyler

log = structlog.get_logger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pyprompt",
        description="Render a git-aware bash/zsh prompt from precomputed Git output",
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="stylecls",
        const=ANSIStyler,
        help="Format prompt for direct display",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="stylecls",
        const=BashStyler,
        help="Format prompt for Bash's PS1 (default)",
    )
    parser.add_argument(
        "--raw",
        action="store_const",
        dest="stylecls",
        const=PlainStyler,
        help="Output the prompt without any colors",
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="stylecls",
        const=ZshStyler,
        help="Format prompt for zsh's PS1",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help=(
            "Read settings from the given TOML file"
            "  [default: $XDG_CONFIG_HOME/pyprompt/config.toml]"
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debugging information to stderr",
    )
    parser.add_argument(
        "--hash-length",
        type=int,
        metavar="N",
        help="Number of characters of the commit hash to show",
    )
    parser.add_argument(
        "--path-length",
        type=int,
        metavar="N",
        help="Maximum number of directory names to show",
    )
    parser.add_argument(
        "-T",
        "--theme",
        choices=list(THEMES.keys()),
        help="Select the color theme to use  [default: dark]",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    git_args = parser.add_argument_group("prompt values")
    git_args.add_argument(
        "--git",
        metavar="GIT_DIR",
        help='Enable Git integration; "." means the shell is inside .git',
    )
    git_args.add_argument("--head", metavar="TEXT", help="Contents of .git/HEAD")
    git_args.add_argument(
        "--hash", metavar="TEXT", help="Output of `git rev-parse HEAD`"
    )
    git_args.add_argument(
        "--status",
        metavar="TEXT",
        help="Output of `git status --porcelain --branch`",
    )
    git_args.add_argument(
        "--bisect-log",
        nargs="?",
        const="1",
        metavar="VALUE",
        help="Set (to a non-empty value) when a bisection is in progress",
    )
    git_args.add_argument(
        "--merge-head", metavar="TEXT", help="Contents of .git/MERGE_HEAD"
    )
    git_args.add_argument(
        "--namerev",
        metavar="TEXT",
        help="Name to show for a detached HEAD, e.g. from `git name-rev`",
    )
    git_args.add_argument("--host", metavar="TEXT", help="Hostname to show")
    git_args.add_argument("--user", metavar="TEXT", help="Username to show")

    args = parser.parse_args(argv)
    configure_logging(debug=args.debug or debug_requested())

    config_path = args.config or default_config_path()
    try:
        config = Config.from_file(config_path).with_overrides(
            path_length=args.path_length,
            hash_length=args.hash_length,
            theme=args.theme,
        )
    except ConfigError as e:
        parser.error(str(e))
    log.debug("Using configuration", config=config)

    data = PromptData.assemble(
        PromptArgs(
            git=args.git,
            head=args.head,
            hash=args.hash,
            status=args.status,
            bisect_log=args.bisect_log,
            merge_head=args.merge_head,
            namerev=args.namerev,
            host=args.host,
            user=args.user,
        ),
        config,
    )
    styler = (args.stylecls or BashStyler)()
    paint = Painter(styler=styler, theme=THEMES[config.theme])
    sys.stdout.write(data.display(paint))


if __name__ == "__main__":
    main()

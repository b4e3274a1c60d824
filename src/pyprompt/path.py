from __future__ import annotations

#: Marker prepended to the first kept segment of a truncated path
ELLIPSIS = "..."


def abbreviate(cwd: str, home: str, path_length: int) -> str:
    """
    Show the path ``cwd`` relative to ``home`` (as ``~`` or ``~/...``) if it
    starts with it, and keep only its last ``path_length`` segments.  When
    segments are dropped, the first remaining one is prefixed with ``...``.

    ``home`` is matched as a plain string prefix, not as a whole path
    component.  An empty ``home`` never matches.
    """
    in_home = bool(home) and cwd.startswith(home)
    if in_home:
        cwd = cwd[len(home) :]
    segments = cwd.split("/")
    if segments and not segments[0]:
        segments = segments[1:]
    if segments and not segments[-1]:
        segments = segments[:-1]
    if len(segments) > path_length:
        segments = segments[-path_length:]
        segments[0] = ELLIPSIS + segments[0]
    short = "/".join(segments)
    if in_home:
        return "~/" + short if short else "~"
    else:
        return "/" + short

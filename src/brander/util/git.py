"""Git remote resolution and hosted-repository URL helpers"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)

PREFERRED_REMOTE = "origin"

_SCP_RE = re.compile(r"^(?:[\w.-]+@)?(?P<host>[\w.-]+):(?P<path>[^/][^#]*?)(?:\.git)?/?(?:#(?P<branch>.+))?$")
_URL_RE = re.compile(
    r"^(?:git\+)?(?:https?|ssh|git)://(?:[^@/]+@)?(?P<host>[\w.-]+)(?::\d+)?/"
    r"(?P<path>[^#]+?)(?:\.git)?/?(?:#(?P<branch>.+))?$"
)


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return result.stdout


def resolve_remote_url(dir_path: Path) -> str | None:
    """Return the URL of the preferred remote of the repository at dir_path.

    The current branch, when known, is appended as a ``#branch`` fragment.
    Returns None when git is unavailable, dir_path is not a repository or it has no remotes.
    """
    try:
        remotes = [r.strip() for r in _git(dir_path, "remote", "show").splitlines() if r.strip()]
        if not remotes:
            log.debug("No remotes found in Git repository at %s", dir_path)
            return None
        remote = PREFERRED_REMOTE if PREFERRED_REMOTE in remotes else remotes[0]
        url = _git(dir_path, "remote", "get-url", remote).strip()
        if not url:
            return None
        branch = _git(dir_path, "branch", "--show-current").strip()
    except (OSError, subprocess.CalledProcessError) as e:
        log.debug("Unable to resolve Git remote for %s: %s", dir_path, e)
        return None
    log.debug("Git repository URL resolved using %r remote: %s", remote, url)
    return f"{url}#{branch}" if branch else url


def hosted_info(url: str) -> tuple[str, str | None] | None:
    """Split a remote URL into (https base URL, branch) or None if it isn't recognised."""
    url = (url or "").strip()
    m = _URL_RE.match(url) or _SCP_RE.match(url)
    if not m:
        return None
    path = m.group("path").strip("/")
    return f"https://{m.group('host')}/{path}", m.group("branch")


def file_url(url: str, file_path: str, fragment: str | None = None, raw: bool = False) -> str | None:
    """Return the hosted (blob or raw) URL for file_path in the repository at url."""
    info = hosted_info(url)
    if info is None:
        return None
    base, branch = info
    result = f"{base}/{'raw' if raw else 'blob'}/{branch or 'HEAD'}/{file_path}"
    return f"{result}#{fragment}" if fragment else result

"""Path-safe static file resolution across ordered search roots.

A request path is turned into one or more ``SearchPath`` candidates
(``search_paths_for``), then ``resolve`` tries each in order until one
yields a readable file.

Security: every candidate is normalised, stripped of
leading ``../`` escapes, symlink-resolved, and verified to lie within
its root *before* any read — including the ``.html`` retry.
"""

import errno
import logging
import posixpath
import re
from dataclasses import dataclass
from pathlib import Path

import anyio

from wren.config import AppConfig
from wren.errors import BadRequest
from wren.static.content_types import content_type_for

logger = logging.getLogger("wren.static")

_PARENT_ESCAPES = re.compile(r"^(?:\.\.[/\\])+")

# Conditions that mean "nothing servable here", as opposed to an I/O fault.
_ABSENT = frozenset(
    {errno.ENOENT, errno.EISDIR, errno.ENOTDIR, errno.ENAMETOOLONG, errno.ELOOP}
)


@dataclass(frozen=True, slots=True)
class SearchPath:
    """A candidate location: a root directory and a path relative to it."""

    root: Path
    relative: str


@dataclass(frozen=True, slots=True)
class StaticFile:
    """A file read from disk, ready to serve."""

    path: Path
    body: bytes
    content_type: str

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()


def search_paths_for(path: str, config: AppConfig) -> tuple[SearchPath, ...]:
    """Build the ordered candidates for a request *path*.

    ``/dist/...`` tries the build output root first, then the frontend
    root. Everything else is looked up under the frontend root, with
    ``/`` mapped to the index file.
    """
    frontend = Path(config.frontend_dir)
    relative = config.index_file if path == "/" else path[1:]

    if path.startswith(config.dist_prefix):
        return (
            SearchPath(Path(config.dist_dir), path[len(config.dist_prefix) :]),
            SearchPath(frontend, relative),
        )
    return (SearchPath(frontend, relative),)


async def _contained(root: Path, relative: str) -> Path | None:
    """Resolve *relative* under *root*; ``None`` if it escapes the root.

    *relative* comes from the ASGI ``path``, which the server has already
    percent-decoded, so ``%`` sequences are literal file-name characters.
    """
    if "\x00" in relative:
        return None
    normalized = _PARENT_ESCAPES.sub("", posixpath.normpath(relative or "."))
    return await _within(root, root / normalized)


async def _within(root: Path, path: Path) -> Path | None:
    candidate = Path(await anyio.Path(path).resolve())
    if not candidate.is_relative_to(root):
        return None
    return candidate


async def _read(path: Path) -> bytes | None:
    """Read *path*, returning ``None`` when there is no file to serve.

    Any other ``OSError`` (permissions, I/O) propagates to the caller.
    """
    try:
        return await anyio.Path(path).read_bytes()
    except OSError as exc:
        if exc.errno in _ABSENT:
            return None
        raise


async def resolve(search_paths: tuple[SearchPath, ...]) -> StaticFile | None:
    """Return the first readable file among *search_paths*.

    Returns ``None`` when every contained candidate is absent.
    Raises ``BadRequest`` when every candidate escaped its root.
    """
    contained_any = False

    for entry in search_paths:
        root = Path(await anyio.Path(entry.root).resolve())
        candidate = await _contained(root, entry.relative)
        if candidate is None:
            logger.warning("Rejected path outside %s: %r", root, entry.relative)
            continue
        contained_any = True

        body = await _read(candidate)
        if body is None and not candidate.suffix:
            html_candidate = await _within(root, Path(f"{candidate}.html"))
            if html_candidate is not None:
                body = await _read(html_candidate)
                candidate = html_candidate

        if body is not None:
            return StaticFile(
                path=candidate,
                body=body,
                content_type=content_type_for(candidate),
            )

    if search_paths and not contained_any:
        raise BadRequest("Bad Request")
    return None

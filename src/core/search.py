"""Line filtering (core domain)."""

from __future__ import annotations

from typing import Callable, Iterator, List


def iter_lines(contents: str) -> Iterator[str]:
    """Yield the lines of ``contents``.

    Only ``\\n`` and ``\\r\\n`` end a line. The last line is yielded whether or
    not the text ends with a newline, and a trailing newline does not add an
    empty line at the end. A ``\\r`` not followed by ``\\n`` is kept.
    """

    if not contents:
        return
    terminated = contents.endswith("\n")
    if terminated:
        contents = contents[:-1]
    lines = contents.split("\n")
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if line.endswith("\r") and (terminated or index < last):
            line = line[:-1]
        yield line


def _filter_lines(query: str, contents: str, transform: Callable[[str], str]) -> List[str]:
    # Containment is tested on the untrimmed line; only the result is stripped.
    needle = transform(query)
    return [line.strip() for line in iter_lines(contents) if needle in transform(line)]


def _identity(text: str) -> str:
    return text


def search(query: str, contents: str) -> List[str]:
    """Return the stripped lines of ``contents`` containing ``query``, in order."""

    return _filter_lines(query, contents, _identity)


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """Like :func:`search`, comparing lowercased text.

    The returned lines keep their original casing.
    """

    return _filter_lines(query, contents, str.lower)

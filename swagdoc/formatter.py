"""Reformat swag annotation comments in Go sources into aligned columns."""

from __future__ import annotations

import hashlib
import logging
import os
import re
import tempfile
from pathlib import Path

from swagdoc.gosource import align_columns, comment_groups, func_doc_comments

SPLIT_TAG = "&*"

_SPECIAL_TAGS = frozenset({"@param", "@success", "@failure", "@response", "@header"})
_SKIP_OPEN = frozenset(b'"({[')
_SKIP_CLOSE = frozenset(b'")}]')
_SWAG_COMMENT = re.compile(r"@[A-z]+")

logger = logging.getLogger(__name__)


class FormatError(Exception):
    """Raised when a file cannot be formatted."""


def replace_range(data: bytes, start: int, end: int, new: str | int) -> bytes:
    """Replace ``data[start:end]`` with the single byte ``new``."""
    if start > end or end < 1:
        return data
    end = min(end, len(data))
    out = bytearray(data[:start] + data[end - 1 :])
    out[start] = new if isinstance(new, int) else ord(new)
    return bytes(out)


def separator_finder(comment: str, replacement: str) -> str:
    """Replace the runs of spaces between annotation fields with ``replacement``."""
    data = comment.encode()
    line = comment.lstrip("/").strip()
    if not line:
        return ""
    attribute = line.split()[0]
    attr_len = data.find(attribute.encode()) + len(attribute.encode())
    pos = attr_len
    if attribute.lower() in _SPECIAL_TAGS:
        skipping = False
        while pos < len(data):
            if not skipping and data[pos] == 0x20:
                end = pos
                while end < len(data) and data[end] == 0x20:
                    end += 1
                data = replace_range(data, pos, end, replacement)
            if data[pos] in _SKIP_OPEN and not skipping:
                skipping = True
            elif data[pos] in _SKIP_CLOSE and skipping:
                skipping = False
            pos += 1
    else:
        while pos < len(data) and data[pos] == 0x20:
            pos += 1
        if pos >= len(data):
            return comment
        data = replace_range(data, attr_len, pos, replacement)
    return data.decode(errors="surrogateescape")


def is_swag_comment(comment: str) -> bool:
    """True when the comment holds an ``@attribute``."""
    return _SWAG_COMMENT.search(comment.lower()) is not None


def is_blank_comment(comment: str) -> bool:
    """True when the comment is only white space."""
    return not comment.strip()


def format_comment_lines(comments: list[str]) -> tuple[str, dict[str, str]]:
    """Align one group of comments; returns ``hash&*line`` text and hash -> original line."""
    old: dict[str, str] = {}
    lines = []
    for comment in comments:
        if is_swag_comment(comment) or is_blank_comment(comment):
            digest = hashlib.md5(comment.encode()).hexdigest()
            old[digest] = comment
            lines.append(digest + SPLIT_TAG + separator_finder(comment, "\t"))
    text = "".join(line + "\n" for line in align_columns(lines, 2))
    return text, old


def backup_file(filename: str, data: bytes, perm: int = 0o644) -> str:
    """Write ``data`` to a new uniquely named file next to ``filename`` and return its name."""
    directory = os.path.dirname(filename) or "."
    fd, name = tempfile.mkstemp(prefix=os.path.basename(filename), dir=directory)
    with os.fdopen(fd, "wb") as handle:
        if os.name != "nt":
            os.chmod(name, perm)
        handle.write(data)
    return name


def write_back(path: str, new: bytes, old: bytes) -> None:
    """Overwrite ``path`` with ``new``, keeping a backup of ``old`` until it succeeds."""
    backup = backup_file(path + ".", old, 0o644)
    try:
        Path(path).write_bytes(new)
    except OSError:
        try:
            os.rename(backup, path)
        except OSError:
            pass
        raise
    os.remove(backup)


def write_formatted_comments(path: str, formatted: str, old_comments: dict[str, str]) -> None:
    """Put the aligned comments in place of the originals in ``path``."""
    try:
        src = Path(path).read_bytes()
    except OSError as exc:
        raise FormatError(f"cannot open file, err: {exc} path : {path} ") from exc
    text = src.decode(errors="surrogateescape")
    for entry in formatted.split("\n"):
        parts = entry.split(SPLIT_TAG)
        if len(parts) != 2:
            continue
        digest, content = parts
        if not is_blank_comment(content):
            text = text.replace(old_comments.get(digest, ""), content, 1)
    write_back(path, text.encode(errors="surrogateescape"), src)


def _read_source(path: str) -> str:
    try:
        return Path(path).read_bytes().decode(errors="surrogateescape")
    except OSError as exc:
        raise FormatError(f"cannot format file, err: {exc} path : {path} ") from exc


class Formatter:
    """Aligns swag annotations in a tree of Go files."""

    def __init__(self):
        self.excludes: set[str] = set()
        self.main_file = ""

    def format_api(self, search_dir: str, exclude_dir: str, main_file: str) -> None:
        """Format the main file, then every other Go file under the search dirs."""
        search_dirs = search_dir.split(",")
        for directory in search_dirs:
            if not os.path.exists(directory):
                raise FormatError(f"dir: {directory} does not exist")
        for item in exclude_dir.split(","):
            item = item.strip()
            if item:
                self.excludes.add(os.path.normpath(item))
        self.format_main(os.path.abspath(os.path.join(search_dirs[0], main_file)))
        self.main_file = main_file
        for directory in search_dirs:
            logger.info("Format API Info, search dir:%s", directory)
            self._walk(directory)

    def _walk(self, top: str) -> None:
        for root, dirs, files in os.walk(top):
            dirs[:] = sorted(d for d in dirs if os.path.normpath(os.path.join(root, d)) not in self.excludes)
            for name in sorted(files):
                path = os.path.join(root, name)
                if os.path.normpath(path) not in self.excludes:
                    self._visit(path)

    def _visit(self, path: str) -> None:
        lower = path.lower()
        if lower.endswith("_test.go") or os.path.splitext(path)[1] != ".go":
            return
        if lower.endswith(self.main_file):
            return
        try:
            self.format_file(path)
        except (FormatError, OSError) as exc:
            raise FormatError(f"ParseFile error:{exc}") from exc

    def _format_groups(self, path: str, groups) -> None:
        formatted: list[str] = []
        old: dict[str, str] = {}
        for group in groups:
            text, mapping = format_comment_lines(group.comments)
            formatted.append(text)
            old.update(mapping)
        write_formatted_comments(path, "".join(formatted), old)

    def format_main(self, main_path: str) -> None:
        """Format every comment of the main file."""
        source = _read_source(main_path)
        try:
            groups = comment_groups(source)
        except ValueError as exc:
            raise FormatError(f"cannot format file, err: {exc} path : {main_path} ") from exc
        self._format_groups(main_path, groups)

    def format_file(self, path: str) -> None:
        """Format the doc comments of the functions in a file."""
        source = _read_source(path)
        try:
            groups = func_doc_comments(source)
        except ValueError as exc:
            raise FormatError(f"cannot format file, err: {exc} path : {path} ") from exc
        self._format_groups(path, groups)
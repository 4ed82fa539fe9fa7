"""Just enough Go source scanning to find comments and function doc comments."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CommentGroup:
    """A run of adjacent comments with nothing but white space between them."""

    comments: list[str] = field(default_factory=list)
    start_line: int = 0
    end_line: int = 0
    trailing: bool = False


@dataclass
class _Comment:
    text: str
    start_line: int
    end_line: int
    trailing: bool
    tokens_before: int


def _skip_quoted(source: str, pos: int, quote: str) -> int:
    """Return the index just past the literal that opens at ``pos``."""
    end = pos + 1
    while end < len(source) and source[end] != quote:
        if source[end] == "\\":
            end += 1
        elif source[end] == "\n":
            raise ValueError("string literal not terminated")
        end += 1
    if end >= len(source):
        raise ValueError("string literal not terminated")
    return end + 1


def _scan(source: str) -> tuple[list[_Comment], list[int]]:
    """Collect comments and the lines of top-level ``func`` keywords."""
    comments: list[_Comment] = []
    func_lines: list[int] = []
    pos, line, depth, parens, tokens = 0, 1, 0, 0, 0
    line_has_code = False
    size = len(source)
    while pos < size:
        char = source[pos]
        if char == "\n":
            line += 1
            line_has_code = False
            pos += 1
            continue
        if char in " \t\r":
            pos += 1
            continue
        if source.startswith("//", pos):
            end = source.find("\n", pos)
            end = size if end == -1 else end
            text = source[pos:end].rstrip("\r")
            comments.append(_Comment(text, line, line, line_has_code, tokens))
            pos = end
            continue
        if source.startswith("/*", pos):
            end = source.find("*/", pos + 2)
            if end == -1:
                raise ValueError("comment not terminated")
            text = source[pos : end + 2]
            last = line + text.count("\n")
            comments.append(_Comment(text, line, last, line_has_code, tokens))
            line = last
            pos = end + 2
            continue
        starts_line = not line_has_code
        line_has_code = True
        tokens += 1
        if char in "\"'":
            pos = _skip_quoted(source, pos, char)
            continue
        if char == "`":
            end = source.find("`", pos + 1)
            if end == -1:
                raise ValueError("raw string literal not terminated")
            line += source.count("\n", pos, end)
            pos = end + 1
            continue
        if char.isalpha() or char == "_":
            end = pos
            while end < size and (source[end].isalnum() or source[end] == "_"):
                end += 1
            if source[pos:end] == "func" and depth == 0 and parens == 0 and starts_line:
                func_lines.append(line)
            pos = end
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "(":
            parens += 1
        elif char == ")":
            parens -= 1
        pos += 1
    return comments, func_lines


def _group(comments: list[_Comment]) -> list[CommentGroup]:
    groups: list[CommentGroup] = []
    current: CommentGroup | None = None
    last: _Comment | None = None
    for comment in comments:
        joins = (
            current is not None
            and last is not None
            and not current.trailing
            and not comment.trailing
            and comment.tokens_before == last.tokens_before
            and comment.start_line <= current.end_line + 1
        )
        if joins:
            current.comments.append(comment.text)
            current.end_line = comment.end_line
        else:
            current = CommentGroup([comment.text], comment.start_line, comment.end_line, comment.trailing)
            groups.append(current)
        last = comment
    return groups


def comment_groups(source: str) -> list[CommentGroup]:
    """All comment groups of a Go file, in order. Raises ValueError on unterminated literals."""
    comments, _ = _scan(source)
    return _group(comments)


def func_doc_comments(source: str) -> list[CommentGroup]:
    """The doc comment groups that sit directly above top-level function declarations."""
    comments, func_lines = _scan(source)
    by_end = {group.end_line: group for group in _group(comments) if not group.trailing}
    return [by_end[line - 1] for line in func_lines if line - 1 in by_end]


def _assign_widths(
    cells: list[list[str]], start: int, end: int, column: int, padding: int, widths: list[dict[int, int]]
) -> None:
    row = start
    while row < end:
        if len(cells[row]) - 1 <= column:
            row += 1
            continue
        block_end = row
        while block_end < end and len(cells[block_end]) - 1 > column:
            block_end += 1
        width = max(len(cells[k][column]) for k in range(row, block_end)) + padding
        for k in range(row, block_end):
            widths[k][column] = width
        _assign_widths(cells, row, block_end, column + 1, padding, widths)
        row = block_end


def align_columns(lines: list[str], padding: int = 2) -> list[str]:
    """Align tab-separated cells into space-padded columns, block by block."""
    cells = [line.split("\t") for line in lines]
    widths: list[dict[int, int]] = [{} for _ in cells]
    _assign_widths(cells, 0, len(cells), 0, padding, widths)
    out = []
    for row, parts in zip(cells, widths):
        head = "".join(cell.ljust(parts[col]) for col, cell in enumerate(row[:-1]))
        out.append(head + row[-1])
    return out
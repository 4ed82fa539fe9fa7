import os

import pytest

from swagdoc.formatter import (
    FormatError,
    Formatter,
    backup_file,
    is_blank_comment,
    is_swag_comment,
    replace_range,
    separator_finder,
    write_back,
    write_formatted_comments,
)


@pytest.mark.parametrize("comment,want", [(" ", True), (" A", False), (" \t", True)])
def test_is_blank_comment(comment, want):
    assert is_blank_comment(comment) is want


@pytest.mark.parametrize(
    "comment,want", [("@Param some_id ", True), ("@ ", False), ("@Success {object} ", True)]
)
def test_is_swag_comment(comment, want):
    assert is_swag_comment(comment) is want


@pytest.mark.parametrize(
    "data,start,end,want",
    [
        (b"// @ID  get-ids", 6, 8, b"// @ID\tget-ids"),
        (b"// @ID  A pet", 6, 8, b"// @ID\tA pet"),
        (b"// @ID  ", 6, 12, b"// @ID\t"),
        (b"// @ID  ", 2, 1, b"// @ID  "),
    ],
)
def test_replace_range(data, start, end, want):
    assert replace_range(data, start, end, "\t") == want


@pytest.mark.parametrize(
    "comment,want",
    [
        (
            '// @Param   some_id  query int  "some id  data" Enums(1, 2, 3)',
            '// @Param|some_id|query|int|"some id  data"|Enums(1, 2, 3)',
        ),
        ("// @Summary   A pet store. ", "// @Summary|A pet store. "),
        ("// @Summary    ", "// @Summary    "),
        (
            '// @Failure      400       {object}  web.APIError{data=web.D ,data2=web.D2}  "We need ID!!"',
            '// @Failure|400|{object}|web.APIError{data=web.D ,data2=web.D2}|"We need ID!!"',
        ),
        ("// ", ""),
    ],
)
def test_separator_finder(comment, want):
    assert separator_finder(comment, "|") == want


def test_write_back(tmp_path):
    test_file = backup_file(str(tmp_path / "test.go"), b"package main \n", 0o644)
    old = open(test_file, "rb").read()
    new = old + b"import ()"
    write_back(test_file, new, old)
    assert open(test_file, "rb").read() == new
    assert os.listdir(tmp_path) == [os.path.basename(test_file)]


def test_write_back_wrong_path(tmp_path):
    with pytest.raises(OSError):
        write_back(str(tmp_path / "missing" / "file.go"), b"a", b"b")


def test_write_back_empty_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(OSError):
        write_back("", b"a", b"b")


def test_write_formatted_comments_wrong_path(tmp_path):
    with pytest.raises(FormatError):
        write_formatted_comments(str(tmp_path / "nope.go"), "", {})


def test_wrong_search_dir():
    with pytest.raises(FormatError):
        Formatter().format_api("/dir_not_have", "", "")


def test_wrong_main_path():
    with pytest.raises(FormatError):
        Formatter().format_main("/dir_not_have/main.go")


def test_wrong_file_path():
    with pytest.raises(FormatError):
        Formatter().format_file("/dir_not_have/api.go")


MAIN_SRC = "package main\n\n// @title Swagger Example API\n// @version     1.0\nfunc main() {}\n"
MAIN_DST = "package main\n\n// @title    Swagger Example API\n// @version  1.0\nfunc main() {}\n"
API_SRC = 'package api\n\n// @Summary Show\n// @Param id path int true "ID"\nfunc Get() {}\n'
API_DST = 'package api\n\n// @Summary  Show\n// @Param    id  path  int  true  "ID"\nfunc Get() {}\n'


def _tree(root):
    (root / "api").mkdir()
    (root / "web").mkdir()
    (root / "main.go").write_text(MAIN_SRC)
    (root / "api" / "api.go").write_text(API_SRC)
    (root / "api" / "api_test.go").write_text(API_SRC)
    (root / "web" / "web.go").write_text(API_SRC)


def test_format_api(tmp_path):
    _tree(tmp_path)
    Formatter().format_api(str(tmp_path), str(tmp_path / "web"), "main.go")
    assert (tmp_path / "main.go").read_text() == MAIN_DST
    assert (tmp_path / "api" / "api.go").read_text() == API_DST
    assert (tmp_path / "api" / "api_test.go").read_text() == API_SRC
    assert (tmp_path / "web" / "web.go").read_text() == API_SRC


def test_format_api_reports_broken_file(tmp_path):
    _tree(tmp_path)
    (tmp_path / "api" / "bad.go").write_text("package api\n/* open")
    with pytest.raises(FormatError, match="ParseFile error"):
        Formatter().format_api(str(tmp_path), "", "main.go")
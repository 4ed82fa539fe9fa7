# swagdoc

`swagdoc` tidies Swagger 2.0 annotations written as comments in Go source
files. Its main job is lining up the columns of annotation comments such as
`@Param`, `@Success`, `@Failure`, `@Response` and `@Header`, so that every
block reads as a neat table. It also carries a small reader for Go struct tags
and a few sample Flask services whose handlers are documented with such
annotations.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Formatting annotation comments

```
swagdoc fmt --dir ./ --generalInfo main.go --exclude ./web
```

`fmt` (alias `f`) takes:

- `--dir` / `-d`: directories to search, comma separated; the general-info
  file must be in the first one (default `./`).
- `--generalInfo` / `-g`: the file holding the general API information
  (default `main.go`).
- `--exclude`: directories and files to leave out, comma separated.

Every comment in the general-info file is aligned; in the other `.go` files,
only the doc comments directly above top-level functions are. Files ending in
`_test.go` and files that are not `.go` files are skipped. Files are rewritten
in place; a backup of the old contents is written next to each file and
removed once the new contents are written. The command exits with status 1
and prints the error when a search directory is missing or a file cannot be
read or scanned.

The same work is available from Python:

```python
from swagdoc.cli import FormatConfig, run_format
from swagdoc.formatter import Formatter

Formatter().format_api("./", "", "main.go")
run_format(FormatConfig(search_dir="./", excludes="", main_file="main.go"))
```

`Formatter.format_main(path)` and `Formatter.format_file(path)` format a
single file. Failures raise `swagdoc.formatter.FormatError`.

The building blocks are public too:

- `separator_finder(comment, replacement)` replaces the runs of spaces between
  the fields of an annotation with `replacement`, leaving quoted text and
  bracketed text alone for the `@Param`-style tags.
- `is_swag_comment(comment)` and `is_blank_comment(comment)` classify lines.
- `format_comment_lines(comments)` aligns one group of comments.
- `write_formatted_comments`, `write_back` and `backup_file` put the result
  in place.

`swagdoc.gosource` does the light scanning of Go text this needs:
`comment_groups(source)` returns every `CommentGroup` of a file,
`func_doc_comments(source)` the groups directly above top-level `func`
declarations, and `align_columns(lines, padding)` pads tab-separated cells
into columns block by block. Unterminated comments or string literals raise
`ValueError`.

## Reading struct tags

`swagdoc.structtag.StructTag` reads tags of the form
`json:"id" example:"1"`:

```python
from swagdoc.structtag import StructTag

tag = StructTag.from_literal('`json:"id" example:"1"`')
tag.get("json")        # "id"
tag.lookup("format")   # None
```

`get` returns an empty string where `lookup` returns `None`.

## Example services

`swagdoc.examples` holds small Flask services. Each module offers
`create_app()` returning a Flask application, and `main(argv=None)` serving
it (`--host`, default `0.0.0.0`; `--port`, default `8080`):

- `celler_app`: accounts, bottles, an admin endpoint and assorted examples
  under `/api/v1`. `create_app(store)` takes an optional
  `celler_model.AccountStore`, an in-memory table seeded with three accounts.
- `basic`: pet lookups and an upload under `/testapi`, with `Pet.from_dict`
  decoding a request body.
- `markdown_api`: user administration under `/admin/user/`.
- `object_map`: `/api/v1/map`, returning a response of maps and a nested
  object.

```python
from swagdoc.examples.celler_app import create_app
from swagdoc.examples.celler_model import AccountStore

client = create_app(AccountStore()).test_client()
print(client.get("/api/v1/accounts").get_json())
```

## What swagdoc does not do

`swagdoc` does not generate Swagger documents: there is no command that
reads annotations and writes `swagger.json`, `swagger.yaml` or a docs
module, and no schema is built from struct tags. The only command is `fmt`,
which rewrites comment layout and nothing else; the sample services do not
serve a Swagger UI.
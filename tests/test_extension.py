"""Tests for extension inference."""

import pytest

from resolve_dependency_path.extension import infer_extension


@pytest.mark.parametrize("file_ext", [".js", ".scss", ".ts", ".jsx", ".less"])
def test_extensionless_dependency_borrows_file_extension(file_ext):
    assert infer_extension("./bar", f"/proj/foo{file_ext}") == file_ext
    assert infer_extension("styles", f"/proj/foo{file_ext}") == file_ext


def test_extensionless_file_gives_empty_extension():
    assert infer_extension("./bar", "/proj/Makefile") == ""


def test_js_dependency_is_not_duplicated():
    assert infer_extension("./index.js", "/proj/foo.js") == ""
    assert infer_extension("../index.js", "/proj/foo.js") == ""


def test_period_in_name_still_gets_js():
    """From a .js file, a non-.js suffix without loader marker is part of the name."""
    assert infer_extension("./bar.baz.qux", "/proj/foo.js") == ".js"
    assert infer_extension("jquery.min", "/proj/foo.js") == ".js"


def test_non_js_file_keeps_dependency_extension():
    assert infer_extension("./bar.scss", "/proj/foo.scss") == ""
    assert infer_extension("./partial.css", "/proj/foo.scss") == ""


def test_implicit_loader_suffix():
    assert infer_extension("templates/file.css!", "/proj/foo.js") == ".css"
    assert infer_extension("./templates/file.css!", "/proj/foo.js") == ".css"


def test_explicit_loader_suffix():
    assert infer_extension("templates/file.txt!text", "/proj/foo.js") == ".txt"
    assert infer_extension("./templates/file.txt!text", "/proj/foo.js") == ".txt"


def test_loader_suffix_from_non_js_file():
    assert infer_extension("file.css!", "/proj/foo.ts") == ".css"


def test_prefix_loader_keeps_dependency_extension():
    """A marker anywhere in the dependency disables the .js-append rule."""
    assert infer_extension("hgn!templates/foo.mustache", "/proj/foo.js") == ""


def test_marker_without_extension_borrows_file_extension():
    assert infer_extension("foo!bar", "/proj/foo.js") == ".js"
    assert infer_extension("css!styles", "/proj/foo.ts") == ".ts"

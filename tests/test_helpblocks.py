"""Tests for the help-block extractor."""

from pathlib import Path

import pytest

from scriptkit.extract import helpblocks
from scriptkit.extract.helpblocks import (
    collect_functions,
    extract_help,
    extract_help_docs,
    find_functions,
    resolve_inputs,
)
from scriptkit.models import NO_HELP_SENTINEL

SAMPLE = """\
function Get-Widget {
    <#
    .SYNOPSIS
    Returns a widget.
    #>
    param($Name)
    "widget $Name"
}

function Set_Widget2 {
    param($Value)
}

function Remove-Widget
{
    <# Deletes <b>one</b> widget & logs it #>
}
"""


def test_find_functions_in_order():
    """Every function matched, in text order, with help or sentinel."""
    records = find_functions(SAMPLE, Path("widgets.ps1"))
    assert [r.name for r in records] == ["Get-Widget", "Set_Widget2", "Remove-Widget"]
    assert records[0].help_text == ".SYNOPSIS\n    Returns a widget."
    assert records[1].help_text == NO_HELP_SENTINEL
    assert records[2].help_text == "Deletes <b>one</b> widget & logs it"
    assert all(r.source_file == Path("widgets.ps1") for r in records)


def test_no_functions():
    assert find_functions("Write-Host 'plain script'\n", Path("x.ps1")) == []


def test_keyword_is_case_sensitive():
    assert find_functions("Function Foo {\n}\n", Path("x.ps1")) == []


def test_body_ends_at_first_column_zero_brace():
    """Nested block closing at column zero ends the body early (known limitation)."""
    text = "function Outer {\n  if ($x) {\n}\n  <# late help #>\n}\n"
    records = find_functions(text, Path("x.ps1"))
    assert len(records) == 1
    assert records[0].help_text == NO_HELP_SENTINEL


def test_indented_brace_does_not_end_body():
    text = "function A {\n    if ($x) {\n    }\n    <# help for A #>\n}\n"
    assert find_functions(text, Path("x.ps1"))[0].help_text == "help for A"


def test_extract_help_first_region_only():
    assert extract_help("<# first #> <# second #>") == "first"


def test_extract_help_custom_markers():
    assert extract_help('""" doc """', '"""', '"""') == "doc"
    assert extract_help("no markers") == NO_HELP_SENTINEL


def test_resolve_inputs(tmp_path):
    """File -> itself; dir -> top-level scripts; missing -> error."""
    (tmp_path / "b.ps1").write_text("", encoding="utf-8")
    (tmp_path / "a.ps1").write_text("", encoding="utf-8")
    (tmp_path / "readme.md").write_text("", encoding="utf-8")
    assert [p.name for p in resolve_inputs(tmp_path, ".ps1")] == ["a.ps1", "b.ps1"]
    assert resolve_inputs(tmp_path / "readme.md", ".ps1") == [tmp_path / "readme.md"]
    with pytest.raises(FileNotFoundError):
        resolve_inputs(tmp_path / "missing", ".ps1")


def test_duplicates_across_files_retained(tmp_path):
    (tmp_path / "a.ps1").write_text("function Dup {\n<# from a #>\n}\n", encoding="utf-8")
    (tmp_path / "b.ps1").write_text("function Dup {\n<# from b #>\n}\n", encoding="utf-8")
    records, skipped = collect_functions(resolve_inputs(tmp_path, ".ps1"))
    assert skipped == []
    assert [(r.name, r.help_text, r.source_file.name) for r in records] == [
        ("Dup", "from a", "a.ps1"),
        ("Dup", "from b", "b.ps1"),
    ]


def test_unreadable_file_skipped(tmp_path, monkeypatch):
    """Permission errors are recorded and the remaining files still processed."""
    locked = tmp_path / "a.ps1"
    locked.write_text("function Hidden {\n}\n", encoding="utf-8")
    (tmp_path / "b.ps1").write_text("function Visible {\n}\n", encoding="utf-8")
    real_read = helpblocks.read_script

    def fake_read(path):
        if Path(path).name == "a.ps1":
            raise PermissionError(13, "Permission denied", str(path))
        return real_read(path)

    monkeypatch.setattr(helpblocks, "read_script", fake_read)
    records, skipped = collect_functions(resolve_inputs(tmp_path, ".ps1"))
    assert [r.name for r in records] == ["Visible"]
    assert skipped == [(locked, "Permission denied")]


def test_extract_help_docs_outputs(tmp_path):
    """Markdown and HTML carry heading, source line, collapsed escaped help."""
    src = tmp_path / "widgets.ps1"
    src.write_text(SAMPLE, encoding="utf-8")
    md_path, html_path = tmp_path / "help.md", tmp_path / "help.html"
    report = extract_help_docs(src, md_path, html_path)
    assert report.sections == 3
    md = md_path.read_text(encoding="utf-8")
    assert "## Get-Widget\n\n*From: widgets.ps1*\n\n```powershell\n.SYNOPSIS" in md
    assert f"```powershell\n{NO_HELP_SENTINEL}\n```" in md
    html = html_path.read_text(encoding="utf-8")
    assert "<script>" in html and "toggleHelp" in html
    assert html.count("<button") == 3
    assert html.count('style="display:none"') == 3
    assert "Deletes &lt;b&gt;one&lt;/b&gt; widget &amp; logs it" in html


def test_zero_functions_header_and_footer_only(tmp_path):
    src = tmp_path / "plain.ps1"
    src.write_text("Write-Host 'no functions here'\n", encoding="utf-8")
    md_path, html_path = tmp_path / "help.md", tmp_path / "help.html"
    report = extract_help_docs(src, md_path, html_path)
    assert report.sections == 0
    assert "## " not in md_path.read_text(encoding="utf-8")
    html = html_path.read_text(encoding="utf-8")
    assert "<h2>" not in html
    assert html.rstrip().endswith("</html>")


def test_missing_path_no_writes(tmp_path):
    with pytest.raises(FileNotFoundError):
        extract_help_docs(tmp_path / "gone", tmp_path / "h.md", tmp_path / "h.html")
    assert not (tmp_path / "h.md").exists()
    assert not (tmp_path / "h.html").exists()


def test_help_text_keeps_form_feed(tmp_path):
    """Help text read from disk is not re-split on form feeds or other separators."""
    src = tmp_path / "a.ps1"
    src.write_text("function Paged {\n<# part one\x0cpart two part three #>\n}\n", encoding="utf-8")
    records, skipped = collect_functions([src])
    assert skipped == []
    assert records[0].help_text == "part one\x0cpart two part three"

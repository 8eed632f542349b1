import subprocess
import sys
import unittest
from importlib import metadata
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from htmlbuilder.cli import main

PAGE = """\
lang: en
head:
  title: Demo
  meta:
    - name: viewport
      content: width=device-width
  stylesheets:
    - assets/base.css
body:
  - tag: h1
    text: Demo
  - tag: ul
    children:
      - tag: li
        text: first
      - tag: li
        text: second
"""


def _write_page(tmp_path: Path, text: str = PAGE, name: str = "page.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_build_writes_html_file(tmp_path: Path):
    page = _write_page(tmp_path)
    out = tmp_path / "site" / "index.html"

    main(["build", str(page), "--out", str(out)])

    html = out.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>\n<html lang=\"en\">\n")

    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.string == "Demo"
    viewport = soup.find("meta", attrs={"name": "viewport"})
    assert viewport["content"] == "width=device-width"
    assert [li.get_text() for li in soup.select("ul li")] == ["first", "second"]
    assert soup.find("link", rel="stylesheet")["href"] == "assets/base.css"


def test_build_prints_to_stdout_without_doctype(tmp_path: Path, capsys):
    page = _write_page(tmp_path)

    main(["build", str(page), "--no-doctype"])

    out = capsys.readouterr().out
    assert out.startswith('<html lang="en">\n  <head>\n')
    assert "    <h1>Demo</h1>\n" in out


def test_build_warns_about_unescaped_text(tmp_path: Path, capsys):
    page = _write_page(tmp_path, "body:\n  - tag: p\n    text: 1 < 2\n")

    main(["build", str(page)])

    captured = capsys.readouterr()
    assert "<p>1 < 2</p>" in captured.out
    assert "not escaped" in captured.err


def test_build_rejects_misplaced_children(tmp_path: Path):
    page = _write_page(tmp_path, "body:\n  - tag: table\n    children:\n      - tag: td\n")

    with pytest.raises(SystemExit, match="Invalid page structure"):
        main(["build", str(page)])


def test_build_rejects_invalid_spec(tmp_path: Path):
    page = _write_page(tmp_path, "body:\n  - text: no tag\n")

    with pytest.raises(SystemExit, match="Invalid page spec"):
        main(["build", str(page)])


def test_build_reports_missing_file(tmp_path: Path):
    with pytest.raises(SystemExit, match="Page file not found"):
        main(["build", str(tmp_path / "missing.yaml")])


def test_validate_accepts_good_pages(tmp_path: Path, capsys):
    first = _write_page(tmp_path)
    second = _write_page(tmp_path, "body: []\n", name="empty.yaml")

    main(["validate", str(first), str(second)])

    assert "Validated 2 page(s)." in capsys.readouterr().out


def test_validate_collects_every_problem(tmp_path: Path, capsys):
    good = _write_page(tmp_path)
    misplaced = _write_page(
        tmp_path, "body:\n  - tag: tr\n    children:\n      - tag: p\n", name="row.yaml"
    )
    broken = _write_page(tmp_path, "body: [\n", name="broken.yaml")

    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(good), str(misplaced), str(broken)])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "row.yaml: invalid page structure" in err
    assert "broken.yaml" in err


def test_version_comes_from_package_metadata(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out == f"htmlbuilder {metadata.version('htmlbuilder')}\n"


def test_build_writes_lf_line_endings(tmp_path: Path):
    page = _write_page(tmp_path)
    out = tmp_path / "index.html"

    main(["build", str(page), "--out", str(out)])

    data = out.read_bytes()
    assert b"\r\n" not in data
    assert data.startswith(b"<!DOCTYPE html>\n")


class CliModuleTest(unittest.TestCase):
    def test_version_runs_as_module(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "htmlbuilder.cli", "--version"],
            capture_output=True,
            text=True,
            cwd=Path(__file__).resolve().parents[1],
        )
        self.assertEqual(result.returncode, 0)
        self.assertTrue(result.stdout.startswith("htmlbuilder "))


if __name__ == "__main__":
    unittest.main()

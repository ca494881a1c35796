import logging
from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError

from uniqueselector.__main__ import EXIT_NOT_FOUND, EXIT_OK, EXIT_USAGE, main

PAGE = """
<html>
  <body>
    <ul class="menu">
      <li><a href="/">Home</a></li>
      <li class="active"><a href="/docs">Docs</a></li>
    </ul>
    <p>one</p><p>two</p>
  </body>
</html>
"""


@pytest.fixture(autouse=True)
def _reset_cli_logger():
    yield
    logger = logging.getLogger("uniqueselector")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def _write_page(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text(PAGE, encoding="utf-8")
    return path


def test_prints_unique_selector_for_target(tmp_path: Path, capsys) -> None:
    code = main(["--html", str(_write_page(tmp_path)), "--target", "li.active"])

    assert code == EXIT_OK
    assert capsys.readouterr().out == ".active\n"


def test_prints_one_line_per_matched_target(tmp_path: Path, capsys) -> None:
    code = main(["--html", str(_write_page(tmp_path)), "--target", "p", "--selector-types", "Tag,NthChild"])

    assert code == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["body > :nth-child(2)", ":nth-child(3)"]


def test_all_flag_prints_every_selector(tmp_path: Path, capsys) -> None:
    code = main(["--html", str(_write_page(tmp_path)), "--target", "li.active", "--all"])

    assert code == EXIT_OK
    assert capsys.readouterr().out.splitlines() == [".active", ".menu > :nth-child(2)"]


def test_target_without_match_is_usage_error(tmp_path: Path, capsys) -> None:
    code = main(["--html", str(_write_page(tmp_path)), "--target", "table"])

    assert code == EXIT_USAGE
    assert capsys.readouterr().out == ""


def test_unknown_selector_type_is_usage_error(tmp_path: Path) -> None:
    code = main(["--html", str(_write_page(tmp_path)), "--target", "p", "--selector-types", "ID,XPath"])

    assert code == EXIT_USAGE


def test_unresolvable_target_reports_not_found(tmp_path: Path, capsys) -> None:
    path = tmp_path / "twins.html"
    path.write_text("<p></p><p></p>", encoding="utf-8")

    code = main(["--html", str(path), "--target", "p", "--selector-types", "Tag"])

    assert code == EXIT_NOT_FOUND
    assert capsys.readouterr().out == ""


def test_missing_file_is_usage_error(tmp_path: Path) -> None:
    code = main(["--html", str(tmp_path / "absent.html"), "--target", "p"])

    assert code == EXIT_USAGE


class _UnreachablePage:
    def goto(self, url: str) -> None:
        raise PlaywrightError(f"net::ERR_NAME_NOT_RESOLVED at {url}")


class _FakeBrowser:
    def __init__(self) -> None:
        self.closed = False

    def new_page(self) -> _UnreachablePage:
        return _UnreachablePage()

    def close(self) -> None:
        self.closed = True


class _FakeChromium:
    def __init__(self, browser: _FakeBrowser) -> None:
        self.browser = browser

    def launch(self, headless: bool = True) -> _FakeBrowser:
        return self.browser


class _FakePlaywright:
    def __init__(self, browser: _FakeBrowser) -> None:
        self.chromium = _FakeChromium(browser)

    def __enter__(self) -> "_FakePlaywright":
        return self

    def __exit__(self, *exc_info) -> None:
        return None


def test_unreachable_url_is_usage_error(monkeypatch, capsys) -> None:
    browser = _FakeBrowser()
    monkeypatch.setattr("playwright.sync_api.sync_playwright", lambda: _FakePlaywright(browser))

    code = main(["--url", "http://unreachable.invalid/", "--target", "p"])

    assert code == EXIT_USAGE
    assert browser.closed
    assert capsys.readouterr().out == ""

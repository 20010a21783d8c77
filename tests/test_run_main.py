"""
Tests for run.py main() with an injected container.
"""
import logging
from unittest.mock import Mock

import pytest

from run import main
from workshopcrawl.container import Container
from workshopcrawl.domain.http_response import HttpResponse
from workshopcrawl.services.catalog_urls import CatalogUrls

URLS = CatalogUrls()

ROOT_HTML = (
    '<div class="apphub_AppName ellipsis">Project Zomboid</div>'
    '<div class="workshopBrowsePagingControls"><a>1</a><a>2</a><a>&gt;</a></div>'
)
PAGE_HTML = (
    '<div class="workshopBrowseItems">'
    '<div><a class="ugc" href="https://steamcommunity.com/sharedfiles/filedetails/?id={}">x</a></div>'
    '</div>'
)


def _container(responses):
    http_service = Mock()
    http_service.fetch.side_effect = lambda url: responses(url)
    container = Container()
    container.http_service.override(http_service)
    return container, http_service


def _site(url):
    if url == URLS.catalog_root("108600"):
        return HttpResponse(200, ROOT_HTML, "text/html", url)
    page = int(url.rsplit("p=", 1)[1])
    return HttpResponse(200, PAGE_HTML.format(page * 100), "text/html", url)


def test_main_writes_ids_and_returns_zero(tmp_path, caplog):
    caplog.set_level(logging.INFO)
    container, http_service = _container(_site)

    code = main(["--game-id", "108600", "--delay", "0", "--output-dir", str(tmp_path)], container=container)

    assert code == 0
    out = tmp_path / "108600 - Project Zomboid.txt"
    assert out.read_text() == "100\n200\n"
    assert http_service.fetch.call_count == 3
    assert "File saved as '108600 - Project Zomboid.txt'" in caplog.text


def test_main_accepts_original_flag_names(tmp_path):
    container, http_service = _container(_site)

    code = main(
        ["--gameID", "108600", "--startPage", "2", "--endPage", "2", "--randomDelay", "0",
         "--delay", "0", "--output-dir", str(tmp_path)],
        container=container,
    )

    assert code == 0
    assert (tmp_path / "108600 - Project Zomboid.txt").read_text() == "200\n"


def test_main_missing_game_id_is_usage_error():
    container, http_service = _container(_site)
    with pytest.raises(SystemExit) as excinfo:
        main([], container=container)
    assert excinfo.value.code == 2
    assert not http_service.fetch.called


def test_main_validation_failure_returns_one(tmp_path, caplog):
    container, _ = _container(lambda url: HttpResponse(200, "", "text/html", "https://steamcommunity.com/workshop/"))

    code = main(["--game-id", "108600", "--delay", "0", "--output-dir", str(tmp_path)], container=container)

    assert code == 1
    assert "could not find catalog for identifier '108600'" in caplog.text
    assert list(tmp_path.iterdir()) == []


def test_main_page_fetch_failure_returns_one(tmp_path, caplog):
    def site(url):
        if url == URLS.catalog_root("108600"):
            return HttpResponse(200, ROOT_HTML, "text/html", url)
        return HttpResponse(500, "oops", "text/html", url)

    container, _ = _container(site)

    code = main(["--game-id", "108600", "--delay", "0", "--output-dir", str(tmp_path)], container=container)

    assert code == 1
    assert "aborted" in caplog.text
    assert list(tmp_path.iterdir()) == []


def test_main_write_failure_returns_one(tmp_path, caplog):
    container, _ = _container(_site)

    code = main(
        ["--game-id", "108600", "--delay", "0", "--output-dir", str(tmp_path / "nope")],
        container=container,
    )

    assert code == 1
    assert "Could not write results" in caplog.text

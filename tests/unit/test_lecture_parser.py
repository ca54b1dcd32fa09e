"""강의 페이지 파서 테스트"""
import json

import pytest
from bs4 import BeautifulSoup

from deckforge.core.document import (
    Deck,
    HtmlGroupPage,
    ImagePage,
    PageKind,
    TablePage,
    TitlePage,
)
from deckforge.parsers import LectureParser, build_pages, is_lecture_page
from deckforge.segmentation.config import SelectorConfig

LECTURE_TABLES = """
<table class="generaltable">
  <thead><tr><th class="header"> Lecture 1 </th></tr></thead>
  <tbody><tr><td><div class="no-overflow"><h2 style="color: red">Intro</h2><p>Text <img src="a.png" alt="A"></p><table class="inner"><tr><td>x</td></tr></table></div></td></tr></tbody>
</table>
<table class="generaltable">
  <tbody><tr><td>no content region</td></tr></tbody>
</table>
"""

PAGE_TEMPLATE = """
<!DOCTYPE html>
<html>
<body id="page-mod-lesson-edit">
{tables}
</body>
</html>
"""

LECTURE_HTML = PAGE_TEMPLATE.format(tables=LECTURE_TABLES)


def soup_of(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


class TestBuildPages:
    """build_pages 테스트"""

    def test_full_lecture(self):
        pages = build_pages(soup_of(LECTURE_HTML))

        assert [page.kind for page in pages] == [
            PageKind.TITLE,
            PageKind.HTML_GROUP,
            PageKind.IMAGE,
            PageKind.HTML_GROUP,
            PageKind.TABLE,
            PageKind.TITLE,
        ]
        assert pages[0] == TitlePage(title="Lecture 1")
        assert pages[1] == HtmlGroupPage(title="Lecture 1", content="<h2>Intro</h2>")
        assert pages[2] == ImagePage(title="Lecture 1", src="a.png", alt="A")
        assert pages[3] == HtmlGroupPage(title="Lecture 1", content="<p>Text </p>")
        assert isinstance(pages[4], TablePage)
        assert pages[4].content.startswith("<table>")
        assert "x" in pages[4].content

    def test_missing_header_uses_placeholder(self):
        pages = build_pages(soup_of(LECTURE_HTML))
        assert pages[-1] == TitlePage(title="Untitled")

    def test_custom_placeholder(self):
        selectors = SelectorConfig(untitled_title="Без названия")
        pages = build_pages(soup_of(LECTURE_HTML), selectors=selectors)
        assert pages[-1] == TitlePage(title="Без названия")

    def test_empty_header_cell_keeps_empty_title(self):
        html = '<table class="generaltable"><thead><tr><th>  </th></tr></thead></table>'
        assert build_pages(soup_of(html)) == [TitlePage(title="")]

    def test_no_lecture_tables(self):
        html = "<html><body><table><tr><td>plain</td></tr></table></body></html>"
        assert build_pages(soup_of(html)) == []

    def test_every_unit_starts_with_title(self):
        html = PAGE_TEMPLATE.format(tables=LECTURE_TABLES * 2)
        pages = build_pages(soup_of(html))

        titles = [i for i, page in enumerate(pages) if isinstance(page, TitlePage)]
        assert titles == [0, 5, 6, 11]

    def test_content_cell_without_tbody(self):
        """tbody가 없는 테이블도 본문을 찾음"""
        html = (
            '<table class="generaltable">'
            '<tr><td><div class="no-overflow"><p>x</p></div></td></tr>'
            "</table>"
        )
        pages = build_pages(soup_of(html))

        assert pages == [
            TitlePage(title="Untitled"),
            HtmlGroupPage(title="Untitled", content="<p>x</p>"),
        ]

    def test_idempotent(self):
        soup = soup_of(LECTURE_HTML)
        assert build_pages(soup) == build_pages(soup)

    def test_document_not_mutated(self):
        soup = soup_of(LECTURE_HTML)
        before = str(soup)
        build_pages(soup)
        assert str(soup) == before


class TestLectureParser:
    """LectureParser 테스트"""

    @pytest.fixture
    def lecture_file(self, tmp_path):
        html_path = tmp_path / "lecture.html"
        html_path.write_text(LECTURE_HTML, encoding="utf-8")
        return html_path

    def test_parse_file(self, lecture_file):
        deck = LectureParser().parse(lecture_file)

        assert isinstance(deck, Deck)
        assert deck.source_path == lecture_file
        assert deck.unit_count == 2
        assert deck.page_count == 6
        assert deck.titles == ["Lecture 1", "Untitled"]

    def test_parse_html_string(self):
        deck = LectureParser().parse_html(LECTURE_HTML)

        assert deck.source_path is None
        assert deck.pages == build_pages(soup_of(LECTURE_HTML))

    def test_empty_document(self):
        deck = LectureParser().parse_html("<html><body></body></html>")

        assert deck.is_empty
        assert deck.unit_count == 0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LectureParser().parse(tmp_path / "missing.html")

    def test_unsupported_extension(self, tmp_path):
        text_file = tmp_path / "lecture.txt"
        text_file.write_text(LECTURE_HTML, encoding="utf-8")

        with pytest.raises(ValueError):
            LectureParser().parse(text_file)

    def test_can_parse_checks_extension(self, tmp_path):
        parser = LectureParser()

        assert parser.can_parse(tmp_path / "Lecture.HTM")
        assert not parser.can_parse(tmp_path / "lecture.pdf")

    def test_is_lecture_page(self):
        assert is_lecture_page(soup_of(LECTURE_HTML))
        assert not is_lecture_page(soup_of("<html><body id='other'></body></html>"))

    def test_deck_to_json(self):
        deck = LectureParser().parse_html(LECTURE_HTML)
        data = json.loads(deck.to_json())

        assert data["unit_count"] == 2
        assert data["pages"][0] == {"type": "title", "title": "Lecture 1"}
        assert data["pages"][2] == {
            "type": "image",
            "title": "Lecture 1",
            "src": "a.png",
            "alt": "A",
        }
        assert [page["type"] for page in data["pages"]] == [
            "title", "htmlGroup", "image", "htmlGroup", "table", "title",
        ]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

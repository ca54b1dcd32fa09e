"""줄 수 추정 및 노드 정제 테스트"""
import pytest
from bs4 import BeautifulSoup, Comment

from deckforge.segmentation.style_utils import NodeSanitizer, TextUtils, sanitize_node


class TestEstimateLines:
    """TextUtils.estimate_lines 테스트"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", 0),
            ("   \n\t ", 0),
            ("a", 1),
            ("a" * 80, 1),
            ("a" * 81, 2),
            ("a" * 650, 9),
            ("   " + "a" * 80 + "   ", 1),
        ],
    )
    def test_default_chars_per_line(self, text, expected):
        """80자 기준 줄 수"""
        assert TextUtils.estimate_lines(text) == expected

    def test_custom_chars_per_line(self):
        """한 줄 글자 수 변경"""
        assert TextUtils.estimate_lines("a" * 25, chars_per_line=10) == 3


class TestCleanText:
    """TextUtils.clean_text 테스트"""

    def test_collapses_whitespace(self):
        assert TextUtils.clean_text("  Hello \n\n  World  ") == "Hello World"

    def test_empty(self):
        assert TextUtils.clean_text("") == ""


class TestNodeSanitizer:
    """NodeSanitizer 테스트"""

    @pytest.fixture
    def soup(self):
        html = (
            '<div class="outer" style="color: red" id="box">'
            '<p style="margin: 0" data-x="1">Hi <b class="strong">there</b>'
            '<img class="pic" src="a.png" alt="A"></p>'
            '<!-- note -->'
            '</div>'
        )
        return BeautifulSoup(html, "lxml")

    def test_removes_style_and_class_recursively(self, soup):
        """모든 깊이의 style/class 제거"""
        clean = sanitize_node(soup.div)

        for tag in [clean] + clean.find_all(True):
            assert "style" not in tag.attrs
            assert "class" not in tag.attrs

    def test_keeps_other_attributes_and_text(self, soup):
        """다른 속성과 텍스트는 유지"""
        clean = sanitize_node(soup.div)

        assert clean["id"] == "box"
        assert clean.p["data-x"] == "1"
        assert clean.img["src"] == "a.png"
        assert clean.img["alt"] == "A"
        assert clean.get_text() == soup.div.get_text()

    def test_does_not_mutate_input(self, soup):
        """입력 트리는 변경되지 않음"""
        before = str(soup)
        clean = sanitize_node(soup.div)
        clean.img.decompose()

        assert str(soup) == before
        assert soup.div["class"] == ["outer"]
        assert soup.div.img is not None

    def test_void_elements_render_without_closing_tag(self, soup):
        """img 같은 void 요소는 닫는 태그 없이 출력"""
        clean = sanitize_node(soup.div)
        assert "</img>" not in str(clean)

    def test_comments_pass_through(self, soup):
        """주석 노드는 그대로 복사"""
        clean = sanitize_node(soup.div)
        comments = [c for c in clean.children if isinstance(c, Comment)]
        assert comments == [" note "]

    def test_text_node_passes_through(self, soup):
        """텍스트 노드는 그대로 반환"""
        text_node = soup.p.contents[0]
        assert sanitize_node(text_node) == "Hi "

    def test_custom_attribute_list(self, soup):
        """제거 대상 속성 변경"""
        sanitizer = NodeSanitizer(stripped_attributes=["id"])
        clean = sanitizer.sanitize(soup.div)

        assert "id" not in clean.attrs
        assert clean["class"] == ["outer"]

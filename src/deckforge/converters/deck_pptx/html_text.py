"""
HTML 조각을 슬라이드 문단으로 펼치는 유틸리티

HtmlGroupPage의 content(정제된 HTML 조각)를 PowerPoint 텍스트 상자에 넣을 수 있는
문단 목록으로 변환합니다. 제목은 굵게, 목록 항목은 글머리표/번호를 붙입니다.
"""
from dataclasses import dataclass
from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from ...segmentation.style_utils import TextUtils

HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}


@dataclass
class TextParagraph:
    """슬라이드 문단 하나"""
    text: str
    level: int = 0  # 목록 들여쓰기 수준
    heading: bool = False
    monospace: bool = False


def html_to_paragraphs(html: str) -> List[TextParagraph]:
    """
    HTML 조각을 문단 목록으로 변환

    Args:
        html: HTML 조각 (마크업 없는 순수 텍스트도 허용)

    Returns:
        빈 문단이 제거된 문단 목록
    """
    if not html or not html.strip():
        return []

    soup = BeautifulSoup(html, "lxml")
    root = soup.body or soup
    paragraphs: List[TextParagraph] = []
    for child in root.children:
        _process_node(child, paragraphs, level=0)
    return [p for p in paragraphs if p.text]


def _process_node(node, paragraphs: List[TextParagraph], level: int) -> None:
    """재귀적으로 노드 처리"""
    if isinstance(node, PreformattedString):
        return

    if isinstance(node, NavigableString):
        text = TextUtils.clean_text(str(node))
        if text:
            paragraphs.append(TextParagraph(text=text, level=level))
        return

    if not isinstance(node, Tag):
        return

    tag_name = node.name.lower()

    if tag_name in HEADING_TAGS:
        paragraphs.append(
            TextParagraph(text=TextUtils.clean_text(node.get_text(" ")), heading=True)
        )
    elif tag_name == "ul":
        for li in node.find_all("li", recursive=False):
            _process_list_item(li, "• ", paragraphs, level)
    elif tag_name == "ol":
        for idx, li in enumerate(node.find_all("li", recursive=False), 1):
            _process_list_item(li, f"{idx}. ", paragraphs, level)
    elif tag_name == "pre":
        for line in node.get_text().splitlines():
            if line.strip():
                paragraphs.append(TextParagraph(text=line.rstrip(), monospace=True))
    elif tag_name == "br":
        return
    else:
        paragraphs.append(
            TextParagraph(text=TextUtils.clean_text(node.get_text(" ")), level=level)
        )


def _process_list_item(
    li: Tag, prefix: str, paragraphs: List[TextParagraph], level: int
) -> None:
    """목록 항목 처리 (중첩 목록은 한 단계 들여씀)"""
    own_parts = []
    nested = []
    for child in li.children:
        if isinstance(child, Tag) and child.name in ("ul", "ol"):
            nested.append(child)
        elif isinstance(child, Tag):
            own_parts.append(child.get_text(" "))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            own_parts.append(str(child))

    text = TextUtils.clean_text(" ".join(own_parts))
    if text:
        paragraphs.append(TextParagraph(text=prefix + text, level=level))
    for sub_list in nested:
        _process_node(sub_list, paragraphs, level + 1)

"""
텍스트 측정 및 노드 정제 유틸리티

슬라이드 분할에 쓰이는 줄 수 추정과,
HTML 노드에서 표현용 속성(style, class)을 제거한 사본을 만드는 기능을 제공합니다.
"""
import math
import re
from typing import Iterable, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from .config import CHARS_PER_LINE

ContentNode = Union[Tag, NavigableString]


class TextUtils:
    """텍스트 처리 유틸리티"""

    @staticmethod
    def estimate_lines(text: str, chars_per_line: int = CHARS_PER_LINE) -> int:
        """
        텍스트가 차지할 "조건부 줄 수" 추정

        Args:
            text: 원본 텍스트
            chars_per_line: 한 줄당 글자 수

        Returns:
            추정 줄 수 (공백뿐인 텍스트는 0)
        """
        if not text:
            return 0
        return math.ceil(len(text.strip()) / chars_per_line)

    @staticmethod
    def clean_text(text: str) -> str:
        """
        텍스트 정리 (불필요한 공백 제거)

        Args:
            text: 원본 텍스트

        Returns:
            정리된 텍스트
        """
        if not text:
            return ""
        text = re.sub(r'\s+', ' ', text)
        return text.strip()


class NodeSanitizer:
    """표현용 속성을 제거한 새 노드 트리를 만드는 클래스"""

    STRIPPED_ATTRIBUTES = ("style", "class")

    def __init__(self, stripped_attributes: Optional[Iterable[str]] = None):
        self.stripped_attributes = frozenset(
            stripped_attributes if stripped_attributes is not None
            else self.STRIPPED_ATTRIBUTES
        )
        # 새 태그 생성용 (void 요소 처리를 위해 lxml 빌더를 사용)
        self._factory = BeautifulSoup("", "lxml")

    def sanitize(self, node: ContentNode) -> ContentNode:
        """
        노드의 정제된 깊은 사본 반환

        모든 하위 요소의 style/class 속성이 제거되며, 텍스트 노드는 그대로 복사됩니다.
        입력 노드는 변경되지 않습니다.

        Args:
            node: BeautifulSoup Tag 또는 NavigableString

        Returns:
            새로 만들어진 노드
        """
        if isinstance(node, NavigableString):
            return type(node)(str(node))

        clone = self._factory.new_tag(node.name, attrs=self._clean_attrs(node))
        for child in node.children:
            clone.append(self.sanitize(child))
        return clone

    def _clean_attrs(self, tag: Tag) -> dict:
        """제거 대상이 아닌 속성만 복사"""
        attrs = {}
        for key, value in tag.attrs.items():
            if key in self.stripped_attributes:
                continue
            attrs[key] = list(value) if isinstance(value, list) else value
        return attrs


DEFAULT_SANITIZER = NodeSanitizer()


def sanitize_node(node: ContentNode) -> ContentNode:
    """기본 설정으로 노드 정제"""
    return DEFAULT_SANITIZER.sanitize(node)

"""
콘텐츠 셀 블록 추출 모듈

강의 본문 셀(.no-overflow)의 직계 자식들을 텍스트/이미지/테이블
원시 블록으로 분류합니다. 문단 안에 들어 있는 이미지는 별도의 이미지 블록으로 분리됩니다.
"""
import logging
from typing import Iterable, List, Optional

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from ..core.document import ImageBlock, PrimitiveBlock, TableBlock, TextBlock
from ..core.extractor import PrimitiveBlockExtractor
from .style_utils import ContentNode, NodeSanitizer, DEFAULT_SANITIZER

logger = logging.getLogger(__name__)

# 문단·제목·목록 태그 (그 외 요소는 일반 요소로 처리)
TEXT_TAGS = frozenset({"h2", "h3", "h4", "p", "ul", "ol"})


class BlockExtractor(PrimitiveBlockExtractor):
    """콘텐츠 컨테이너의 자식 노드를 원시 블록으로 분류하는 추출기"""

    def __init__(self, sanitizer: Optional[NodeSanitizer] = None):
        self.sanitizer = sanitizer or DEFAULT_SANITIZER

    def extract(self, source: Iterable[ContentNode]) -> List[PrimitiveBlock]:
        """
        자식 노드 목록에서 원시 블록 추출 (문서 순서 유지)

        Args:
            source: 컨테이너의 직계 자식 노드들

        Returns:
            원시 블록 목록
        """
        blocks: List[PrimitiveBlock] = []
        for node in source:
            if isinstance(node, Tag):
                blocks.extend(self._extract_element(node))
            elif isinstance(node, PreformattedString):
                # 주석, CDATA, doctype 등은 본문이 아님
                continue
            elif isinstance(node, NavigableString):
                text = str(node).strip()
                if text:
                    blocks.append(TextBlock(html=text, text=text))

        logger.debug(f"블록 추출 완료: {len(blocks)}개")
        return blocks

    def _extract_element(self, element: Tag) -> List[PrimitiveBlock]:
        """요소 하나를 태그 종류에 따라 분류"""
        tag_name = element.name.lower()
        clone = self.sanitizer.sanitize(element)

        if tag_name == "table":
            return [TableBlock(html=str(clone))]

        if tag_name == "img":
            return [self._image_block(clone)]

        if tag_name not in TEXT_TAGS:
            logger.debug(f"일반 요소로 처리: <{tag_name}>")

        # 일반 요소도 이미지를 분리하므로 이미지만 든 래퍼는 이미지 블록 하나가 됨
        return self._hoist_images(clone)

    def _hoist_images(self, clone: Tag) -> List[PrimitiveBlock]:
        """
        요소 내부의 이미지를 별도 블록으로 분리

        이미지 블록들이 먼저 (문서 순서대로) 나오고,
        이미지를 제거한 뒤 남은 텍스트가 있으면 텍스트 블록이 마지막에 붙습니다.
        """
        result: List[PrimitiveBlock] = []
        for img in clone.find_all("img"):
            result.append(self._image_block(img))
            img.decompose()

        leftover_text = clone.get_text().strip()
        if leftover_text:
            result.append(TextBlock(html=str(clone), text=leftover_text))
        return result

    @staticmethod
    def _image_block(img: Tag) -> ImageBlock:
        return ImageBlock(src=img.get("src") or "", alt=img.get("alt") or "")


def extract_blocks(children: Iterable[ContentNode]) -> List[PrimitiveBlock]:
    """기본 설정으로 원시 블록 추출"""
    return BlockExtractor().extract(children)

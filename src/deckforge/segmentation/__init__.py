"""
슬라이드 분할 모듈

강의 본문을 원시 블록으로 추출하고 슬라이드 크기의 페이지로 묶는 기능을 제공합니다.
"""
from .config import (
    SegmentationConfig,
    SelectorConfig,
    DEFAULT_SEGMENTATION_CONFIG,
    DEFAULT_SELECTOR_CONFIG,
)
from .style_utils import TextUtils, NodeSanitizer, sanitize_node
from .block_extractor import BlockExtractor, extract_blocks
from .slide_grouper import GroupingState, SlideGrouper, group_into_pages

__all__ = [
    "SegmentationConfig",
    "SelectorConfig",
    "DEFAULT_SEGMENTATION_CONFIG",
    "DEFAULT_SELECTOR_CONFIG",
    "TextUtils",
    "NodeSanitizer",
    "sanitize_node",
    "BlockExtractor",
    "extract_blocks",
    "GroupingState",
    "SlideGrouper",
    "group_into_pages",
]

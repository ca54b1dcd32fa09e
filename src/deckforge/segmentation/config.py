"""
슬라이드 분할 설정 및 상수

줄 수 추정 기준, 슬라이드 용량(최소/최대 줄 수),
강의 테이블을 찾는 CSS 선택자를 관리합니다.
"""
from dataclasses import dataclass, field
from typing import Tuple

CHARS_PER_LINE = 80
MIN_LINES = 7
MAX_LINES = 15


@dataclass(frozen=True)
class SegmentationConfig:
    """텍스트 슬라이드 용량 설정 (추정 줄 수 기준)"""
    chars_per_line: int = CHARS_PER_LINE
    min_lines: int = MIN_LINES
    max_lines: int = MAX_LINES

    def __post_init__(self):
        if self.chars_per_line <= 0:
            raise ValueError(f"chars_per_line은 양수여야 합니다: {self.chars_per_line}")
        if self.min_lines < 0:
            raise ValueError(f"min_lines는 음수일 수 없습니다: {self.min_lines}")
        if self.max_lines <= 0:
            raise ValueError(f"max_lines는 양수여야 합니다: {self.max_lines}")
        if self.min_lines > self.max_lines:
            raise ValueError(
                f"min_lines({self.min_lines})가 max_lines({self.max_lines})보다 클 수 없습니다"
            )


@dataclass(frozen=True)
class SelectorConfig:
    """Moodle 강의 페이지 구조 선택자"""
    unit_selector: str = ".generaltable"
    header_selector: str = "thead tr th"
    # lxml은 브라우저와 달리 <tbody>를 자동으로 넣지 않으므로 대체 선택자를 함께 둔다
    content_selectors: Tuple[str, ...] = field(
        default=("tbody tr td .no-overflow", "tr td .no-overflow")
    )
    page_marker: str = "#page-mod-lesson-edit"
    untitled_title: str = "Untitled"

    def __post_init__(self):
        if not self.content_selectors:
            raise ValueError("content_selectors가 비어 있습니다")


# 기본 설정 인스턴스
DEFAULT_SEGMENTATION_CONFIG = SegmentationConfig()
DEFAULT_SELECTOR_CONFIG = SelectorConfig()

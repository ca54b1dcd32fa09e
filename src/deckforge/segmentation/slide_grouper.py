"""
슬라이드 그룹화 모듈

원시 블록 목록을 슬라이드 단위 페이지 디스크립터로 묶습니다.

규칙:
 - 이미지/테이블은 항상 단독 슬라이드 (대기 중인 텍스트를 먼저 내보냄)
 - 텍스트 블록은 추정 줄 수가 max_lines를 넘지 않는 한 탐욕적으로 합침
 - max_lines를 넘는 단일 블록은 나누지 않고 단독 슬라이드
 - 넘칠 때 현재 그룹이 min_lines 미만이면 블록을 억지로 붙인 뒤 바로 내보냄
   (이 경우 max_lines를 넘을 수 있음)

상태는 불변 GroupingState로 표현되며, step()을 블록마다 적용하는 fold로 동작합니다.
"""
import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable, List, Optional, Tuple

from ..core.document import (
    HtmlGroupPage,
    ImageBlock,
    ImagePage,
    PageDescriptor,
    PrimitiveBlock,
    TableBlock,
    TablePage,
    TextBlock,
)
from .config import SegmentationConfig, DEFAULT_SEGMENTATION_CONFIG
from .style_utils import TextUtils

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupingState:
    """그룹화 누적 상태"""
    pending: Tuple[TextBlock, ...] = ()
    lines: int = 0
    pages: Tuple[PageDescriptor, ...] = ()


class SlideGrouper:
    """원시 블록을 슬라이드 페이지로 묶는 클래스"""

    def __init__(self, title: str, config: SegmentationConfig = None):
        """
        Args:
            title: 모든 페이지에 붙는 강의 제목
            config: 줄 수 기준 설정
        """
        self.title = title
        self.config = config or DEFAULT_SEGMENTATION_CONFIG

    def group(self, blocks: Iterable[PrimitiveBlock]) -> List[PageDescriptor]:
        """
        블록 목록 전체를 페이지 목록으로 변환 (타이틀 페이지 제외)

        Args:
            blocks: 문서 순서의 원시 블록

        Returns:
            페이지 디스크립터 목록
        """
        pages: List[PageDescriptor] = []

        def collect(state: GroupingState, block: PrimitiveBlock) -> GroupingState:
            # 내보낸 페이지는 목록으로 옮기고 상태에는 대기 그룹만 남김
            state = self.step(state, block)
            pages.extend(state.pages)
            return replace(state, pages=())

        state = reduce(collect, blocks, GroupingState())
        pages.extend(self.finish(state).pages)
        logger.debug(f"'{self.title}': {len(pages)}개 페이지 생성")
        return pages

    def step(self, state: GroupingState, block: PrimitiveBlock) -> GroupingState:
        """블록 하나를 처리한 다음 상태 반환"""
        if isinstance(block, TextBlock):
            return self._add_text(state, block)
        if isinstance(block, ImageBlock):
            state = self.flush(state)
            page = ImagePage(title=self.title, src=block.src, alt=block.alt)
            return replace(state, pages=state.pages + (page,))
        if isinstance(block, TableBlock):
            state = self.flush(state)
            page = TablePage(title=self.title, content=block.html)
            return replace(state, pages=state.pages + (page,))
        raise TypeError(f"알 수 없는 블록 타입: {type(block).__name__}")

    def finish(self, state: GroupingState) -> GroupingState:
        """남아 있는 그룹을 내보냄"""
        return self.flush(state)

    def flush(self, state: GroupingState) -> GroupingState:
        """대기 중인 텍스트 블록을 HtmlGroupPage로 내보내고 누적값 초기화"""
        if not state.pending:
            return GroupingState(pages=state.pages)
        page = HtmlGroupPage(
            title=self.title,
            content="\n".join(block.html for block in state.pending),
        )
        return GroupingState(pages=state.pages + (page,))

    def _add_text(self, state: GroupingState, block: TextBlock) -> GroupingState:
        lines = TextUtils.estimate_lines(block.text, self.config.chars_per_line)

        # 단독으로도 한 슬라이드를 넘는 블록
        if lines > self.config.max_lines:
            state = self.flush(state)
            page = HtmlGroupPage(title=self.title, content=block.html)
            return replace(state, pages=state.pages + (page,))

        if state.lines + lines <= self.config.max_lines:
            return replace(
                state,
                pending=state.pending + (block,),
                lines=state.lines + lines,
            )

        if state.lines >= self.config.min_lines:
            state = self.flush(state)
            return replace(state, pending=(block,), lines=lines)

        # 최소 줄 수 미만 그룹: 최대치를 넘더라도 붙여서 바로 내보냄
        logger.debug(
            f"'{self.title}': {state.lines}+{lines}줄 강제 병합 "
            f"(max_lines={self.config.max_lines})"
        )
        merged = replace(
            state,
            pending=state.pending + (block,),
            lines=state.lines + lines,
        )
        return self.flush(merged)


def group_into_pages(
    title: str,
    blocks: Iterable[PrimitiveBlock],
    config: Optional[SegmentationConfig] = None,
) -> List[PageDescriptor]:
    """원시 블록을 페이지 디스크립터로 묶는 편의 함수"""
    return SlideGrouper(title, config).group(blocks)

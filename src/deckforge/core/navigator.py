"""
슬라이드 덱 탐색기

뷰어의 이전/다음 이동과 위치 표시("3/10")를 화면과 무관하게 모델링합니다.
"""
from typing import Optional, Sequence

from .document import PageDescriptor

EMPTY_DECK_MESSAGE = "Nothing to display"


class DeckNavigator:
    """페이지 목록 위를 이동하는 커서"""

    def __init__(self, pages: Sequence[PageDescriptor], start: int = 0):
        self.pages = list(pages)
        self._index = 0
        self.go_to(start)

    @property
    def index(self) -> int:
        return self._index

    @property
    def total(self) -> int:
        return len(self.pages)

    @property
    def is_empty(self) -> bool:
        return not self.pages

    @property
    def current_page(self) -> Optional[PageDescriptor]:
        """현재 페이지 (빈 덱이면 None)"""
        if self.is_empty:
            return None
        return self.pages[self._index]

    def go_to(self, index: int) -> Optional[PageDescriptor]:
        """지정 위치로 이동 (범위를 벗어나면 양 끝으로 고정)"""
        if self.is_empty:
            self._index = 0
        else:
            self._index = min(max(index, 0), self.total - 1)
        return self.current_page

    def next(self) -> Optional[PageDescriptor]:
        return self.go_to(self._index + 1)

    def previous(self) -> Optional[PageDescriptor]:
        return self.go_to(self._index - 1)

    @property
    def position_label(self) -> str:
        """위치 표시 문자열 (예: "3/10")"""
        if self.is_empty:
            return "0/0"
        return f"{self._index + 1}/{self.total}"

    @property
    def progress(self) -> float:
        """진행률 (0.0 ~ 1.0)"""
        if self.is_empty:
            return 0.0
        return (self._index + 1) / self.total

"""
슬라이드 덱 데이터 모델

강의 HTML에서 추출한 원시 블록(PrimitiveBlock)과
슬라이드 단위의 페이지 디스크립터(PageDescriptor)를 정의합니다.
"""
import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class PageKind(Enum):
    """페이지 디스크립터 타입"""
    TITLE = "title"
    HTML_GROUP = "htmlGroup"
    IMAGE = "image"
    TABLE = "table"


@dataclass(frozen=True)
class TextBlock:
    """텍스트 블록 (정제된 마크업 + 순수 텍스트)"""
    html: str
    text: str  # 줄 수 추정에 사용


@dataclass(frozen=True)
class ImageBlock:
    """이미지 블록 - 다른 블록과 합쳐지지 않음"""
    src: str
    alt: str


@dataclass(frozen=True)
class TableBlock:
    """테이블 블록 - 항상 단독 슬라이드"""
    html: str


PrimitiveBlock = Union[TextBlock, ImageBlock, TableBlock]


@dataclass(frozen=True)
class TitlePage:
    """강의 단위의 타이틀 슬라이드"""
    title: str

    kind = PageKind.TITLE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "title": self.title}


@dataclass(frozen=True)
class HtmlGroupPage:
    """여러 텍스트 블록을 묶은 슬라이드"""
    title: str
    content: str

    kind = PageKind.HTML_GROUP

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "title": self.title, "content": self.content}


@dataclass(frozen=True)
class ImagePage:
    """이미지 슬라이드"""
    title: str
    src: str
    alt: str

    kind = PageKind.IMAGE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "title": self.title,
            "src": self.src,
            "alt": self.alt,
        }


@dataclass(frozen=True)
class TablePage:
    """테이블 슬라이드"""
    title: str
    content: str

    kind = PageKind.TABLE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value, "title": self.title, "content": self.content}


PageDescriptor = Union[TitlePage, HtmlGroupPage, ImagePage, TablePage]


@dataclass
class Deck:
    """문서 하나에서 만들어진 슬라이드 덱"""
    pages: List[PageDescriptor] = field(default_factory=list)
    source_path: Optional[Path] = None
    unit_count: int = 0  # 발견된 강의 테이블 수

    @property
    def is_empty(self) -> bool:
        """표시할 페이지가 없는지 여부"""
        return not self.pages

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def titles(self) -> List[str]:
        """타이틀 슬라이드 제목 목록"""
        return [page.title for page in self.pages if isinstance(page, TitlePage)]

    def to_dict(self) -> Dict[str, Any]:
        """덱을 딕셔너리로 변환"""
        return {
            "source": str(self.source_path) if self.source_path else None,
            "unit_count": self.unit_count,
            "pages": [page.to_dict() for page in self.pages],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """덱을 JSON 문자열로 변환"""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

"""
데이터 추출 기본 클래스
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, List

from .document import PrimitiveBlock


class BaseExtractor(ABC):
    """모든 추출기의 기본 인터페이스"""

    @abstractmethod
    def extract(self, source: Any) -> Any:
        """
        소스에서 데이터 추출

        Args:
            source: 추출할 데이터 소스

        Returns:
            추출된 데이터
        """
        pass


class PrimitiveBlockExtractor(BaseExtractor):
    """원시 블록 추출기 기본 클래스"""

    @abstractmethod
    def extract(self, source: Iterable[Any]) -> List[PrimitiveBlock]:
        """컨테이너 자식 노드들에서 원시 블록 추출"""
        pass

"""
파서 인터페이스 정의
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from .document import Deck


class BaseParser(ABC):
    """모든 파서의 기본 인터페이스"""

    @property
    @abstractmethod
    def supported_extensions(self) -> List[str]:
        """이 파서가 지원하는 파일 확장자 목록"""
        pass

    @abstractmethod
    def parse(self, file_path: Path) -> Deck:
        """
        파일을 파싱하여 Deck 객체로 변환

        Args:
            file_path: 파싱할 파일 경로

        Returns:
            Deck: 슬라이드 덱

        Raises:
            FileNotFoundError: 파일이 존재하지 않는 경우
            ValueError: 지원하지 않는 파일 형식인 경우
        """
        pass

    def can_parse(self, file_path: Path) -> bool:
        """
        이 파서가 해당 파일을 파싱할 수 있는지 확인

        Args:
            file_path: 확인할 파일 경로

        Returns:
            bool: 파싱 가능 여부
        """
        return file_path.suffix.lower() in self.supported_extensions

    def validate_file(self, file_path: Path) -> None:
        """
        파일 유효성 검사

        Args:
            file_path: 검사할 파일 경로

        Raises:
            FileNotFoundError: 파일이 존재하지 않는 경우
            ValueError: 지원하지 않는 파일 형식인 경우
        """
        if not file_path.exists():
            raise FileNotFoundError(f"파일을 찾을 수 없습니다: {file_path}")

        if not self.can_parse(file_path):
            raise ValueError(
                f"지원하지 않는 파일 형식입니다. "
                f"지원 형식: {', '.join(self.supported_extensions)}"
            )

    def read_file(self, file_path: Path, encoding: str = "utf-8") -> str:
        """
        검증 후 파일 내용을 문자열로 읽기

        Args:
            file_path: 읽을 파일 경로
            encoding: 파일 인코딩

        Returns:
            str: 파일 내용
        """
        self.validate_file(file_path)
        with open(file_path, "r", encoding=encoding) as f:
            return f.read()

"""
Exceptions raised by the website embedding generator.
"""

from pathlib import Path
from typing import Dict, List


class WebsiteGenError(Exception):
    """생성 실패의 기본 예외"""


class SourceDirectoryError(WebsiteGenError):
    """소스 디렉토리가 없거나 디렉토리가 아님"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory '{path}' does not exist or is not a directory.")


class OutputDirectoryError(WebsiteGenError):
    """출력 디렉토리를 생성하거나 쓸 수 없음"""

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        message = f"'{path}' seems to be unusable."
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ContentTypeError(WebsiteGenError):
    """확장자로부터 MIME 타입을 결정할 수 없음"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot resolve a content type for '{name}'.")


class IdentifierCollisionError(WebsiteGenError):
    """서로 다른 경로가 같은 C 식별자로 변환됨"""

    def __init__(self, collisions: Dict[str, List[str]]):
        self.collisions = collisions
        details = "; ".join(
            f"{name} <- {', '.join(paths)}" for name, paths in collisions.items()
        )
        super().__init__(f"Identifier collision: {details}")


class FileNameEncodingError(WebsiteGenError):
    """UTF-8로 표현할 수 없는 파일 이름"""

    def __init__(self, path: str):
        self.path = path
        shown = path.encode("utf-8", "backslashreplace").decode("utf-8")
        super().__init__(f"File name is not valid UTF-8: '{shown}'")

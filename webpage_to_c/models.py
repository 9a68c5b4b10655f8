"""
Data models for the website embedding generator.

이 모듈은 소스 트리 스캔 결과와 생성 설정을 저장하기 위한 데이터 모델을 제공합니다.
"""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .errors import IdentifierCollisionError
from .identifiers import find_collisions, format_name

COMPRESSED_SUFFIX = ".gz"
INDEX_FILE = "index.html"


def logical_name(path: str) -> str:
    """압축 접미사(.gz)를 제거한 이름"""
    if path.endswith(COMPRESSED_SUFFIX):
        return path[:-len(COMPRESSED_SUFFIX)]
    return path


class Framework(Enum):
    """지원하는 임베디드 웹 서버 프레임워크"""
    ARDUINO = "arduino"
    ESPIDF = "espidf"


@dataclass(frozen=True)
class Asset:
    """서빙 가능한 파일 하나 (압축/비압축 중복 제거 이후)"""
    relative_path: str
    content_type: str

    @property
    def is_compressed(self) -> bool:
        return self.relative_path.endswith(COMPRESSED_SUFFIX)

    @property
    def logical_path(self) -> str:
        return logical_name(self.relative_path)

    @property
    def identifier(self) -> str:
        return format_name(self.relative_path)

    @property
    def route(self) -> str:
        return "/" + self.logical_path

    @property
    def is_index(self) -> bool:
        """소스 루트의 index.html 여부 ("/" 경로로도 등록됨)"""
        return self.logical_path == INDEX_FILE


@dataclass
class RouteTable:
    """
    순서가 있는 에셋 목록과 루트("/") 대체 엔트리

    에셋 순서는 트리 순회 순서와 같으며 배열, 핸들러, 등록 구문의 출력 순서를 결정합니다.
    """
    assets: List[Asset] = field(default_factory=list)

    def __post_init__(self):
        collisions = find_collisions(a.relative_path for a in self.assets)
        if collisions:
            raise IdentifierCollisionError(collisions)

    @property
    def fallback(self) -> Optional[Asset]:
        """소스 루트의 index.html 에셋 (없으면 None)"""
        return next((a for a in self.assets if a.is_index), None)

    def routes(self) -> Iterator[Tuple[str, Asset]]:
        """등록 순서대로 (경로, 에셋) 쌍 반환. "/"는 /index.html 바로 앞에 위치"""
        fallback = self.fallback
        for asset in self.assets:
            if asset is fallback:
                yield "/", asset
            yield asset.route, asset

    @property
    def route_count(self) -> int:
        return len(self.assets) + (1 if self.fallback else 0)

    def __len__(self) -> int:
        return len(self.assets)


@dataclass
class GeneratorConfig:
    """생성기 실행 설정"""
    source_dir: Path
    target_dir: Path = Path("lib")
    framework: Framework = Framework.ARDUINO
    author: str = ""
    year: int = field(default_factory=lambda: datetime.date.today().year)
    strict_content_types: bool = False

    def __post_init__(self):
        self.source_dir = Path(self.source_dir)
        self.target_dir = Path(self.target_dir)
        if not isinstance(self.framework, Framework):
            self.framework = Framework(self.framework)

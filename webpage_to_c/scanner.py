"""
Source tree scanner for website embedding.

이 모듈은 웹사이트 디렉토리를 재귀적으로 탐색하여 에셋 목록을 생성합니다.
같은 디렉토리에 'F'와 'F.gz'가 함께 있으면 압축된 파일만 사용합니다.
"""

import errno
import logging
import mimetypes
import os
from pathlib import Path
from typing import List, Optional, Set, Tuple

from .errors import ContentTypeError, FileNameEncodingError, SourceDirectoryError
from .models import COMPRESSED_SUFFIX, Asset, logical_name

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# 기본 테이블에 없거나 파이썬 버전마다 다른 웹 확장자
_EXTRA_TYPES = {
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".map": "application/json",
    ".webmanifest": "application/manifest+json",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".ico": "image/x-icon",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
}

# 시스템 mime.types 파일을 읽지 않는 인스턴스 (호스트와 무관하게 동일한 결과)
_mime_db = mimetypes.MimeTypes(filenames=())
for _ext, _type in _EXTRA_TYPES.items():
    _mime_db.add_type(_type, _ext)


def resolve_content_type(name: str) -> str:
    """
    논리 파일 이름(압축 접미사 제거)에서 MIME 타입 결정

    Raises:
        ContentTypeError: 알 수 없는 확장자
    """
    content_type, encoding = _mime_db.guess_type(name, strict=False)
    # .gz 이외의 인코딩 접미사(.br, .xz, .bz2 ...)는 지원하지 않음
    if content_type is None or encoding is not None:
        raise ContentTypeError(name)
    return content_type


class TreeScanner:
    """웹사이트 소스 트리 스캐너"""

    def __init__(self, source_root: str, fallback_content_type: Optional[str] = DEFAULT_CONTENT_TYPE):
        """
        초기화

        Args:
            source_root: 웹사이트 루트 디렉토리
            fallback_content_type: 알 수 없는 확장자에 사용할 MIME 타입.
                None이면 ContentTypeError를 전파
        """
        self.source_root = Path(source_root)
        self.fallback_content_type = fallback_content_type

    def scan(self) -> List[Asset]:
        """
        소스 트리 전체를 새로 탐색

        Returns:
            순회 순서(디렉토리별 이름순, 깊이 우선)의 에셋 목록
        """
        if not self.source_root.is_dir():
            raise SourceDirectoryError(self.source_root)

        logger.info(f"소스 트리 스캔 시작: {self.source_root}")
        assets = self._scan_directory(self.source_root, "", set())
        logger.info(f"{len(assets)}개의 에셋 발견")
        return assets

    def _scan_directory(self, directory: Path, prefix: str,
                        ancestors: Set[Tuple[int, int]]) -> List[Asset]:
        """단일 디렉토리 탐색 (하위 디렉토리는 재귀)"""
        stat = directory.stat()
        key = (stat.st_dev, stat.st_ino)
        if key in ancestors:
            raise OSError(errno.ELOOP, "Symbolic link loop", str(directory))
        ancestors = ancestors | {key}

        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)

        file_names = {e.name for e in entries if e.is_file()}
        assets: List[Asset] = []

        for entry in entries:
            rel = prefix + entry.name
            try:
                rel.encode("utf-8")
            except UnicodeEncodeError:
                raise FileNameEncodingError(os.path.join(str(directory), entry.name)) from None

            if entry.is_dir():
                assets.extend(self._scan_directory(Path(entry.path), rel + "/", ancestors))
                continue
            if not entry.is_file():
                # 끊어진 심볼릭 링크는 여기서 FileNotFoundError 발생
                os.stat(entry.path)
                logger.debug(f"일반 파일이 아님, 건너뜀: {rel}")
                continue

            # 압축된 형제 파일이 있으면 비압축 파일은 제외
            if entry.name + COMPRESSED_SUFFIX in file_names:
                logger.debug(f"압축 파일 우선 사용: {rel}{COMPRESSED_SUFFIX}")
                continue

            content_type = self._content_type(logical_name(rel))
            assets.append(Asset(relative_path=rel, content_type=content_type))

        return assets

    def _content_type(self, logical_path: str) -> str:
        """MIME 타입 결정 (설정에 따라 기본값 또는 오류)"""
        try:
            return resolve_content_type(logical_path)
        except ContentTypeError:
            if self.fallback_content_type is None:
                raise
            logger.warning(f"알 수 없는 확장자, {self.fallback_content_type} 사용: {logical_path}")
            return self.fallback_content_type


class SourceReader:
    """상대 경로로 소스 파일 내용을 읽는 리더"""

    def __init__(self, source_root: str):
        self.source_root = Path(source_root)

    def __call__(self, relative_path: str) -> bytes:
        with open(self.source_root / relative_path, "rb") as f:
            return f.read()

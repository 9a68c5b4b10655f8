"""
End-to-end website embedding pipeline.

전체 생성 과정을 실행합니다:
1. 소스 트리 스캔
2. 라우트 테이블 구성 (식별자 충돌 검사)
3. 헤더/소스 생성 및 저장
"""

import logging
from pathlib import Path
from typing import List, Optional

from .errors import SourceDirectoryError
from .frameworks import get_variant
from .generator import Reader, WebsiteGenerator
from .models import GeneratorConfig, RouteTable
from .scanner import DEFAULT_CONTENT_TYPE, SourceReader, TreeScanner
from .writer import OutputWriter

logger = logging.getLogger(__name__)


def generate_website(config: GeneratorConfig, reader: Optional[Reader] = None) -> List[Path]:
    """
    설정에 따라 website 헤더/소스 파일 생성

    Args:
        config: 생성 설정
        reader: 파일 내용 리더 (기본값: 소스 디렉토리에서 읽기)

    Returns:
        작성된 파일 경로 목록 [헤더, 소스]
    """
    if not config.source_dir.is_dir():
        raise SourceDirectoryError(config.source_dir)

    writer = OutputWriter(str(config.target_dir))
    writer.prepare()

    # 단계 1: 소스 트리 스캔
    logger.info("[1/3] 소스 트리 스캔 중...")
    fallback = None if config.strict_content_types else DEFAULT_CONTENT_TYPE
    scanner = TreeScanner(str(config.source_dir), fallback_content_type=fallback)
    assets = scanner.scan()

    # 단계 2: 라우트 테이블 구성
    logger.info("[2/3] 라우트 테이블 구성 중...")
    table = RouteTable(assets)
    if table.fallback is None:
        logger.info("루트 index.html 없음, '/' 경로는 등록되지 않습니다")

    # 단계 3: 코드 생성
    variant = get_variant(config.framework)
    logger.info(f"[3/3] {variant.framework.value} 코드 생성 중...")
    generator = WebsiteGenerator(variant, author=config.author, year=config.year)
    if reader is None:
        reader = SourceReader(str(config.source_dir))

    written = writer.write_all([
        (generator.header_file_name, [generator.render_header(table)]),
        (generator.source_file_name, generator.iter_source(table, reader)),
    ])

    logger.info(f"에셋 {len(table)}개, 라우트 {table.route_count}개")
    return written

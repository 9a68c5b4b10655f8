"""
C/C++ source generator using Jinja2 templates.

이 모듈은 에셋 목록을 바탕으로 헤더 파일과 소스 파일의 코드 조각을 생성합니다.
프레임워크별 차이는 FrameworkVariant와 템플릿에만 존재합니다.
"""

import datetime
import logging
from pathlib import Path
from typing import Callable, Iterator, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .frameworks import FrameworkVariant
from .models import Asset, RouteTable

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
HEADER_BASENAME = "website"

Reader = Callable[[str], bytes]


class WebsiteGenerator:
    """임베디드 웹사이트 코드 생성기"""

    def __init__(self, variant: FrameworkVariant, author: str = "",
                 year: Optional[int] = None, template_dir: Optional[str] = None):
        """
        초기화

        Args:
            variant: 대상 프레임워크 변형
            author: 저작권 배너에 들어갈 이름
            year: 저작권 연도 (기본값: 올해)
            template_dir: Jinja2 템플릿 디렉토리 경로
        """
        self.variant = variant
        self.author = author
        self.year = year if year is not None else datetime.date.today().year
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR

        # Jinja2 환경 설정
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined
        )

        # 커스텀 필터 등록
        self.env.filters['c_array'] = self._c_array
        self.env.filters['c_string'] = self._c_string

        self.env.globals.update(
            variant=self.variant,
            author=self.author,
            year=self.year,
            header_file=self.header_file_name
        )

    @property
    def header_file_name(self) -> str:
        return HEADER_BASENAME + self.variant.header_extension

    @property
    def source_file_name(self) -> str:
        return HEADER_BASENAME + self.variant.source_extension

    def _render(self, template_name: str, **context) -> str:
        return self.env.get_template(template_name).render(**context)

    def render_header(self, table: RouteTable) -> str:
        """헤더 파일 전체 생성"""
        return self._render(self.variant.header_template, table=table)

    def encode(self, asset: Asset, data: bytes) -> str:
        """길이 상수와 바이트 배열 선언 생성"""
        return self._render("asset.j2", asset=asset, name=asset.identifier, data=data)

    def emit_route(self, asset: Asset) -> str:
        """에셋 하나를 서빙하는 핸들러(또는 라우팅 레코드) 생성"""
        return self._render(self.variant.route_template, asset=asset, name=asset.identifier)

    def emit_registration(self, table: RouteTable) -> str:
        """모든 라우트를 등록하는 registerWebsite() 생성"""
        return self._render(self.variant.registration_template, table=table)

    def iter_source(self, table: RouteTable, reader: Reader) -> Iterator[str]:
        """
        소스 파일 코드 조각을 순서대로 생성

        파일 내용은 해당 에셋을 인코딩할 때만 읽고 보관하지 않습니다.

        Args:
            table: 라우트 테이블
            reader: 상대 경로를 받아 파일 바이트를 반환하는 함수
        """
        yield self._render("source_head.j2")

        if self.variant.prologue_template:
            yield "\n" + self._render(self.variant.prologue_template, table=table)

        for asset in table.assets:
            data = reader(asset.relative_path)
            logger.debug(f"{asset.relative_path} -> {asset.identifier} ({len(data)} bytes)")
            yield "\n" + self.encode(asset, data)
            yield "\n" + self.emit_route(asset)

        yield "\n" + self.emit_registration(table)

    def render_source(self, table: RouteTable, reader: Reader) -> str:
        """소스 파일 전체를 문자열로 생성"""
        return "".join(self.iter_source(table, reader))

    @staticmethod
    def _c_array(data: bytes) -> str:
        """바이트를 C 배열 초기화 구문으로 변환 (빈 데이터는 '{}')"""
        return "{" + ", ".join(f"0x{byte:02x}" for byte in data) + "}"

    @staticmethod
    def _c_string(text: str) -> str:
        """C 문자열 리터럴 내부용 이스케이프"""
        return text.replace("\\", "\\\\").replace('"', '\\"')

"""
Framework variants for generated web server code.

각 변형은 파일 확장자, 저장 한정자, 템플릿 이름만 제공합니다.
순회/인코딩 로직은 변형과 무관하게 한 번만 구현됩니다.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .models import Framework


@dataclass(frozen=True)
class FrameworkVariant:
    """프레임워크별 코드 형태"""
    framework: Framework
    header_extension: str
    source_extension: str
    storage_qualifier: str
    header_template: str
    route_template: str
    registration_template: str
    prologue_template: Optional[str] = None


VARIANTS: Dict[Framework, FrameworkVariant] = {
    # Arduino WebServer: 핸들러 함수 + 전역 server 객체
    Framework.ARDUINO: FrameworkVariant(
        framework=Framework.ARDUINO,
        header_extension=".h",
        source_extension=".cpp",
        storage_qualifier="PROGMEM",
        header_template="arduino/header.h.j2",
        route_template="arduino/route.j2",
        registration_template="arduino/register.j2",
    ),
    # ESP-IDF esp_http_server: 정적 URI 레코드 + 공용 핸들러
    Framework.ESPIDF: FrameworkVariant(
        framework=Framework.ESPIDF,
        header_extension=".h",
        source_extension=".c",
        storage_qualifier="",
        header_template="espidf/header.h.j2",
        route_template="espidf/route.j2",
        registration_template="espidf/register.j2",
        prologue_template="espidf/prologue.j2",
    ),
}


def get_variant(framework: Framework) -> FrameworkVariant:
    return VARIANTS[Framework(framework)]

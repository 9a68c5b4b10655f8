"""
C identifier derivation for embedded asset names.

경로를 대문자로 바꾸고 영숫자가 아닌 문자를 '_'로 치환합니다.
생성된 심볼 이름은 외부에서 참조될 수 있으므로 규칙 변경은 출력 호환성을 깨뜨립니다.
"""

import re
from typing import Dict, Iterable, List

SEPARATOR = "_"

_INVALID_CHARS = re.compile(r"[^A-Z0-9]")


def format_name(relative_path: str) -> str:
    """
    상대 경로를 C 식별자로 변환

    Args:
        relative_path: 소스 루트 기준 저장 경로 ('.gz' 포함)

    Returns:
        예: 'css/app.min.css.gz' -> 'CSS_APP_MIN_CSS_GZ'
    """
    name = _INVALID_CHARS.sub(SEPARATOR, relative_path.upper())
    # C 식별자는 숫자로 시작할 수 없음
    if name[:1].isdigit():
        name = SEPARATOR + name
    return name


def find_collisions(relative_paths: Iterable[str]) -> Dict[str, List[str]]:
    """같은 식별자로 변환되는 경로 그룹 반환 (충돌 없으면 빈 dict)"""
    groups: Dict[str, List[str]] = {}
    for path in relative_paths:
        groups.setdefault(format_name(path), []).append(path)
    return {name: paths for name, paths in groups.items() if len(paths) > 1}

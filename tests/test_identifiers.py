"""
Tests for C identifier derivation.

이 모듈은 경로 -> C 식별자 변환과 충돌 검사를 검증합니다.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from webpage_to_c.errors import IdentifierCollisionError
from webpage_to_c.identifiers import find_collisions, format_name
from webpage_to_c.models import Asset, RouteTable


class TestFormatName:
    """format_name 테스트"""

    @pytest.mark.parametrize("path,expected", [
        ("index.html", "INDEX_HTML"),
        ("app.js.gz", "APP_JS_GZ"),
        ("css/main-theme.min.css", "CSS_MAIN_THEME_MIN_CSS"),
        ("img/My Logo.png", "IMG_MY_LOGO_PNG"),
        ("a__b", "A__B"),
    ])
    def test_formatting(self, path, expected):
        assert format_name(path) == expected

    def test_compressed_suffix_is_kept(self):
        """저장 이름 기준이므로 .gz 유무에 따라 식별자가 다름"""
        assert format_name("app.js") != format_name("app.js.gz")

    def test_deterministic(self):
        assert format_name("js/vendor/lib.js") == format_name("js/vendor/lib.js")

    def test_case_insensitive(self):
        """원래 경로의 대소문자와 무관"""
        assert format_name("Index.HTML") == format_name("index.html") == "INDEX_HTML"

    def test_leading_digit_is_prefixed(self):
        """숫자로 시작하는 이름은 '_' 접두사"""
        assert format_name("404.html") == "_404_HTML"

    def test_result_is_c_identifier(self):
        for path in ["ä/ö.css", "x y/z-w.js", "9lives.txt", "."]:
            name = format_name(path)
            assert name[0] == "_" or name[0].isalpha()
            assert all(c == "_" or c.isdigit() or "A" <= c <= "Z" for c in name)


class TestCollisions:
    """식별자 충돌 검사 테스트"""

    def test_no_collisions(self):
        assert find_collisions(["index.html", "app.js.gz", "css/a.css"]) == {}

    def test_collision_detected(self):
        collisions = find_collisions(["a-b.js", "a_b.js", "A.B.js", "c.js"])

        assert list(collisions) == ["A_B_JS"]
        assert collisions["A_B_JS"] == ["a-b.js", "a_b.js", "A.B.js"]

    def test_route_table_rejects_collisions(self):
        """라우트 테이블 구성 시 충돌하면 즉시 실패"""
        assets = [
            Asset("img/logo.png", "image/png"),
            Asset("img-logo.png", "image/png"),
        ]

        with pytest.raises(IdentifierCollisionError) as exc_info:
            RouteTable(assets)

        assert "IMG_LOGO_PNG" in str(exc_info.value)
        assert "img/logo.png" in str(exc_info.value)
        assert "img-logo.png" in str(exc_info.value)

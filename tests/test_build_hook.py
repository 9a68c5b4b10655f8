"""
Tests for the PlatformIO build integration.

이 모듈은 platformio.ini 옵션 해석과 빌드 중단 동작을 검증합니다.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from webpage_to_c.build_hook import DEFAULT_TARGET, build_config, embed_website
from webpage_to_c.models import Framework


class FakeEnv(dict):
    """SCons 환경 대역 (프로젝트 옵션 + Exit 기록)"""

    def __init__(self, project_dir, options):
        super().__init__(PROJECT_DIR=str(project_dir))
        self.options = options
        self.exit_codes = []

    def GetProjectOption(self, name, default=None):
        return self.options.get(name, default)

    def Exit(self, code):
        self.exit_codes.append(code)


@pytest.fixture
def project_dir(tmp_path):
    """data/www 아래 index.html이 있는 프로젝트"""
    www = tmp_path / "data" / "www"
    www.mkdir(parents=True)
    (www / "index.html").write_text("<p>hi</p>")
    return tmp_path


class TestBuildConfig:
    """옵션 해석 테스트"""

    def test_defaults(self, project_dir):
        env = FakeEnv(project_dir, {"custom_website_source": "data/www"})

        config = build_config(env)

        assert config.source_dir == project_dir / "data" / "www"
        assert config.target_dir == project_dir / DEFAULT_TARGET
        assert config.framework is Framework.ARDUINO
        assert config.author == ""

    def test_all_options(self, project_dir):
        env = FakeEnv(project_dir, {
            "custom_website_source": "data/www",
            "custom_website_target": "components/web",
            "custom_website_framework": "espidf",
            "custom_website_author": "Jane Doe",
        })

        config = build_config(env)

        assert config.target_dir == project_dir / "components" / "web"
        assert config.framework is Framework.ESPIDF
        assert config.author == "Jane Doe"

    def test_source_not_set(self, project_dir):
        assert build_config(FakeEnv(project_dir, {})) is None


class TestEmbedWebsite:
    """빌드 훅 실행 테스트"""

    def test_generates_on_call(self, project_dir):
        """호출 즉시 생성 (빌드 액션으로 미루지 않음)"""
        env = FakeEnv(project_dir, {"custom_website_source": "data/www"})

        assert embed_website(env) is True

        target = project_dir / DEFAULT_TARGET
        assert (target / "website.h").exists()
        assert (target / "website.cpp").exists()
        assert env.exit_codes == []

    def test_skips_without_source(self, project_dir):
        env = FakeEnv(project_dir, {})

        assert embed_website(env) is False
        assert not (project_dir / DEFAULT_TARGET).exists()
        assert env.exit_codes == []

    def test_failure_stops_build(self, project_dir):
        """생성 실패 시 env.Exit(1)"""
        env = FakeEnv(project_dir, {"custom_website_source": "data/missing"})

        assert embed_website(env) is False
        assert env.exit_codes == [1]

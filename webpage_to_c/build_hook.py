"""
PlatformIO build integration.

pre: extra script가 로드될 때 바로 웹사이트를 변환합니다. 생성된 소스가
컴파일 대상 목록에 포함되려면 SCons가 소스를 수집하기 전에 파일이 있어야 하므로
AddPreAction이 아니라 스크립트 로드 시점에 실행합니다.
"""

import logging
import os

from .errors import WebsiteGenError
from .models import GeneratorConfig
from .pipeline import generate_website

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "lib/website"


def _option(env, name, default=None):
    return env.GetProjectOption(name, default)


def build_config(env):
    """
    platformio.ini의 custom_website_* 옵션으로 GeneratorConfig 생성

    Returns:
        GeneratorConfig, custom_website_source가 없으면 None
    """
    source_dir = _option(env, "custom_website_source")
    if not source_dir:
        return None

    project_dir = env["PROJECT_DIR"]
    return GeneratorConfig(
        source_dir=os.path.join(project_dir, source_dir),
        target_dir=os.path.join(project_dir, _option(env, "custom_website_target", DEFAULT_TARGET)),
        framework=_option(env, "custom_website_framework", "arduino"),
        author=_option(env, "custom_website_author", "")
    )


def embed_website(env) -> bool:
    """
    웹사이트 임베딩 실행

    실패하면 env.Exit(1)로 빌드를 중단합니다.

    Returns:
        생성했으면 True, 설정이 없어 건너뛰었으면 False
    """
    config = build_config(env)
    if config is None:
        logger.warning("custom_website_source not set. Skipping website embedding.")
        return False

    print("\n" + "=" * 60)
    print(f"Embedding website: {config.source_dir}")
    print("=" * 60)

    try:
        generate_website(config)
    except (WebsiteGenError, OSError) as e:
        print(f"Website embedding: FAILED ({e})")
        env.Exit(1)
        return False

    print("=" * 60 + "\n")
    return True

"""
Command line entry point for website embedding.

이 스크립트는 웹사이트 디렉토리를 C/C++ 소스로 변환합니다.
빌드 후처리 단계에서 한 번 실행하는 용도이며 생성 속도는 중요하지 않습니다.
"""

import argparse
import logging
from typing import List, Optional

from .errors import WebsiteGenError
from .models import Framework, GeneratorConfig
from .pipeline import generate_website

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webpage-to-c",
        description="Embed a static website into C/C++ sources for ESP web servers."
    )
    parser.add_argument(
        "-s", "--source",
        required=True,
        help="Sets the root directory containing the website."
    )
    parser.add_argument(
        "-t", "--target",
        default="lib",
        help="Sets the target directory where the output is generated. (default: lib)"
    )
    parser.add_argument(
        "-f", "--framework",
        choices=[f.value for f in Framework],
        default=Framework.ARDUINO.value,
        help="Target web server framework. (default: arduino)"
    )
    parser.add_argument(
        "-a", "--author",
        default="",
        help="Name used in the copyright banner of the generated files."
    )
    parser.add_argument(
        "--strict-content-types",
        action="store_true",
        help="Fail on unknown file extensions instead of serving application/octet-stream."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every embedded file."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = GeneratorConfig(
        source_dir=args.source,
        target_dir=args.target,
        framework=Framework(args.framework),
        author=args.author,
        strict_content_types=args.strict_content_types
    )

    try:
        generate_website(config)
    except WebsiteGenError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"Something went wrong! {e}")
        return 1

    return 0

"""
Output writer for generated header/source pairs.

헤더와 소스는 임시 파일에 먼저 쓰고, 둘 다 완성된 뒤에만 최종 이름으로 교체합니다.
중간에 실패하면 임시 파일을 삭제하므로 반쯤 작성된 출력이 남지 않습니다.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Tuple

from .errors import OutputDirectoryError

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"


class OutputWriter:
    """출력 디렉토리 관리 및 파일 쓰기"""

    def __init__(self, target_dir: str):
        self.target_dir = Path(target_dir)

    def prepare(self) -> Path:
        """
        출력 디렉토리 생성 및 쓰기 가능 여부 확인

        Raises:
            OutputDirectoryError: 디렉토리를 만들 수 없거나 쓸 수 없음
        """
        try:
            self.target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(self.target_dir, e.strerror or str(e)) from e

        if not os.access(self.target_dir, os.W_OK | os.X_OK):
            raise OutputDirectoryError(self.target_dir, "not writable")

        return self.target_dir

    def write_all(self, outputs: Iterable[Tuple[str, Iterable[str]]]) -> List[Path]:
        """
        여러 파일을 한 묶음으로 작성

        렌더링 중 실패하면 기존 출력은 그대로 남습니다. 최종 이름으로 교체하는
        도중 실패하면 이번 실행의 파일이 모두 삭제되어 출력이 없는 상태가 됩니다.

        Args:
            outputs: (파일 이름, 코드 조각 iterable) 목록

        Returns:
            작성된 최종 파일 경로 목록
        """
        staged: List[Tuple[Path, Path]] = []
        try:
            for file_name, fragments in outputs:
                final_path = self.target_dir / file_name
                temp_path = final_path.with_name(final_path.name + TEMP_SUFFIX)
                staged.append((temp_path, final_path))
                with open(temp_path, "w", encoding="utf-8", newline="\n") as f:
                    for fragment in fragments:
                        f.write(fragment)
        except BaseException:
            for temp_path, _ in staged:
                if temp_path.exists():
                    temp_path.unlink()
            raise

        # os.replace는 파일 하나 단위로만 원자적이므로, 도중에 실패하면
        # 이미 교체된 파일도 삭제하여 짝이 맞지 않는 헤더/소스가 남지 않게 함
        replaced: List[Path] = []
        try:
            for temp_path, final_path in staged:
                os.replace(temp_path, final_path)
                replaced.append(final_path)
        except OSError:
            for final_path in replaced:
                final_path.unlink()
            for temp_path, _ in staged:
                if temp_path.exists():
                    temp_path.unlink()
            logger.error(f"출력 교체 실패, 생성된 파일 삭제: {self.target_dir}")
            raise

        for final_path in replaced:
            logger.info(f"생성 완료: {final_path}")

        return replaced

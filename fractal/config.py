"""카오스 게임 실행 파라미터.

기본값은 400x400 캔버스, 정6각형, 1/6 비율, 100000회 반복입니다.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400
DEFAULT_ITERATIONS = 100000
DEFAULT_FRACTION = 1.0 / 6.0
DEFAULT_SIDES = 6
DEFAULT_MAX_SEED_ATTEMPTS = 10000
DEFAULT_OUTPUT = 'fractal.png'


class ConfigError(ValueError):
    """잘못된 기하/반복 설정."""


@dataclass(frozen=True)
class ChaosConfig:
    """카오스 게임 한 번의 실행을 정의하는 파라미터 묶음.

    Args:
        width, height: 공칭 캔버스 크기 (출력 이미지는 (width+1) x (height+1))
        iterations: 찍을 점의 개수
        fraction: 꼭짓점에서 현재 점 방향으로 이동하는 비율 (0~1)
        side_count: 정다각형 변의 개수 (3 이상)
        radius: 외접원 반지름 (None이면 min(width, height) / 2)
        center: 다각형 중심 (None이면 캔버스 중앙)
        seed: 난수 시드 (None이면 매 실행마다 다름)
        max_seed_attempts: 시작점 거부 샘플링 최대 시도 횟수
        output: 저장할 PNG 경로
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    iterations: int = DEFAULT_ITERATIONS
    fraction: float = DEFAULT_FRACTION
    side_count: int = DEFAULT_SIDES
    radius: Optional[float] = None
    center: Optional[Tuple[float, float]] = None
    seed: Optional[int] = None
    max_seed_attempts: int = DEFAULT_MAX_SEED_ATTEMPTS
    output: str = DEFAULT_OUTPUT

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f'캔버스 크기는 양수여야 합니다: {self.width}x{self.height}')
        if self.side_count < 3:
            raise ConfigError(f'변의 개수는 3 이상이어야 합니다: side_count={self.side_count}')
        if self.radius is not None and self.radius <= 0:
            raise ConfigError(f'반지름은 양수여야 합니다: radius={self.radius}')
        if not 0.0 <= self.fraction <= 1.0:
            raise ConfigError(f'fraction은 [0, 1] 범위여야 합니다: fraction={self.fraction}')
        if self.iterations < 0:
            raise ConfigError(f'반복 횟수는 음수일 수 없습니다: iterations={self.iterations}')
        if self.max_seed_attempts < 1:
            raise ConfigError(f'max_seed_attempts는 1 이상이어야 합니다: {self.max_seed_attempts}')

        # 모든 꼭짓점이 캔버스 [0, width] x [0, height] 안에 있어야 함
        cx, cy = self.resolved_center
        r = self.resolved_radius
        if cx - r < 0 or cy - r < 0 or cx + r > self.width or cy + r > self.height:
            raise ConfigError(
                f'다각형이 캔버스를 벗어납니다: center=({cx}, {cy}), radius={r}, '
                f'canvas={self.width}x{self.height}'
            )

    @property
    def resolved_radius(self) -> float:
        if self.radius is None:
            return min(self.width, self.height) / 2
        return float(self.radius)

    @property
    def resolved_center(self) -> Tuple[float, float]:
        if self.center is None:
            return self.width / 2, self.height / 2
        return float(self.center[0]), float(self.center[1])

    @property
    def image_size(self) -> Tuple[int, int]:
        """출력 이미지 (가로, 세로) 픽셀 수. 공칭 크기보다 1픽셀 여유가 있습니다."""
        return self.width + 1, self.height + 1

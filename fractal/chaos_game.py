#!/usr/bin/env python3
"""카오스 게임으로 정다각형 프랙탈 이미지를 생성합니다.

다각형 내부의 임의 점에서 시작하여, 매 반복마다 임의의 꼭짓점을 고르고
꼭짓점에서 현재 점 방향으로 fraction만큼 떨어진 점을 찍습니다.

사용 예:
  python -m fractal.chaos_game
  python -m fractal.chaos_game --sides 3 --fraction 0.5 --output sierpinski.png
  python -m fractal.chaos_game --iterations 200000 --seed 42 --preview points.png
"""

import argparse

import numpy as np

from .canvas import BLACK, WHITE, init_canvas, plot, save_png
from .config import (
    DEFAULT_FRACTION,
    DEFAULT_HEIGHT,
    DEFAULT_ITERATIONS,
    DEFAULT_MAX_SEED_ATTEMPTS,
    DEFAULT_OUTPUT,
    DEFAULT_SIDES,
    DEFAULT_WIDTH,
    ChaosConfig,
    ConfigError,
)
from .geometry import build_regular_polygon, contains, point_on_fraction


class SeedAcquisitionError(RuntimeError):
    """시도 횟수 안에 다각형 내부 시작점을 찾지 못함."""


def acquire_seed(polygon, width, height, rng, max_attempts=DEFAULT_MAX_SEED_ATTEMPTS):
    """거부 샘플링으로 다각형 내부의 시작점을 찾습니다.

    [0, width) x [0, height) 범위의 정수 좌표를 뽑아 내부 판정을 통과할 때까지 반복.

    Returns:
        (시작점, 시도 횟수)
    """
    for attempt in range(1, max_attempts + 1):
        x = float(rng.integers(0, width))
        y = float(rng.integers(0, height))
        if contains(polygon, (x, y)):
            return (x, y), attempt
    raise SeedAcquisitionError(
        f'{max_attempts}번 시도했지만 다각형 내부 점을 찾지 못했습니다. '
        '다각형이 캔버스에 비해 너무 작지 않은지 확인하세요.'
    )


def iterate_points(vertices, seed, fraction, iterations, rng):
    """시작점에서 출발해 정확히 iterations개의 점을 생성합니다.

    다음 점 = point_on_fraction(꼭짓점, 현재 점, fraction)
    (꼭짓점 -> 현재 점 방향. 순서를 바꾸면 다른 프랙탈이 나옵니다.)
    """
    current = seed
    n = len(vertices)
    for _ in range(iterations):
        vertex = vertices[rng.integers(0, n)]
        current = point_on_fraction(vertex, current, fraction)
        yield current


def render(config, rng=None, verbose=False):
    """설정에 따라 프랙탈을 캔버스에 그립니다.

    Args:
        config: ChaosConfig
        rng: numpy Generator (None이면 config.seed로 생성)
        verbose: 시작점 정보 출력 여부

    Returns:
        (캔버스 BGR 배열, 찍은 점 배열 (iterations, 2))
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)

    polygon, vertices = build_regular_polygon(
        config.side_count, config.resolved_radius, config.resolved_center
    )
    seed, attempts = acquire_seed(
        polygon, config.width, config.height, rng, max_attempts=config.max_seed_attempts
    )
    if verbose:
        print(f'시작점: ({seed[0]:.0f}, {seed[1]:.0f}) - {attempts}번째 시도에서 찾음')

    img_w, img_h = config.image_size
    canvas = init_canvas(img_w, img_h, WHITE)
    points = np.empty((config.iterations, 2), dtype=float)
    for i, point in enumerate(iterate_points(vertices, seed, config.fraction, config.iterations, rng)):
        plot(canvas, point, BLACK)
        points[i] = point
    return canvas, points


def generate_fractal(config, verbose=True):
    """프랙탈을 생성하여 config.output에 PNG로 저장합니다.

    Returns:
        (캔버스 배열, 찍은 점 배열, 저장된 파일 경로)
    """
    canvas, points = render(config, verbose=verbose)
    path = save_png(canvas, config.output)
    if verbose:
        h, w = canvas.shape[:2]
        print(f'생성: {path} ({w}x{h}, 정{config.side_count}각형, {len(points)}개 점)')
    return canvas, points, path


def build_parser():
    p = argparse.ArgumentParser(description='카오스 게임 프랙탈 생성')
    p.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='캔버스 가로 크기')
    p.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='캔버스 세로 크기')
    p.add_argument('--iterations', '-n', type=int, default=DEFAULT_ITERATIONS, help='찍을 점의 개수')
    p.add_argument('--fraction', type=float, default=DEFAULT_FRACTION,
                   help='꼭짓점에서 현재 점 방향으로 이동할 비율 (0~1)')
    p.add_argument('--sides', type=int, default=DEFAULT_SIDES, help='정다각형 변의 개수')
    p.add_argument('--radius', type=float, default=None, help='외접원 반지름 (기본: 캔버스 절반)')
    p.add_argument('--seed', type=int, default=None, help='난수 시드 (재현용)')
    p.add_argument('--max-seed-attempts', type=int, default=DEFAULT_MAX_SEED_ATTEMPTS,
                   help='시작점 샘플링 최대 시도 횟수')
    p.add_argument('--output', '-o', default=DEFAULT_OUTPUT, help='출력 PNG 경로')
    p.add_argument('--preview', default=None, help='점 분포 미리보기(matplotlib) 저장 경로')
    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ChaosConfig(
            width=args.width,
            height=args.height,
            iterations=args.iterations,
            fraction=args.fraction,
            side_count=args.sides,
            radius=args.radius,
            seed=args.seed,
            max_seed_attempts=args.max_seed_attempts,
            output=args.output,
        )
    except ConfigError as e:
        parser.error(str(e))

    try:
        _, points, _ = generate_fractal(config, verbose=True)
    except (SeedAcquisitionError, OSError) as e:
        raise SystemExit(f'프랙탈 생성 실패: {e}')

    if args.preview:
        from .preview import save_preview
        polygon, _ = build_regular_polygon(
            config.side_count, config.resolved_radius, config.resolved_center
        )
        out = save_preview(points, polygon, args.preview, config.image_size)
        print(f'미리보기 저장: {out}')


if __name__ == '__main__':
    main()

import cv2
import numpy as np
import pytest

from fractal.chaos_game import (
    SeedAcquisitionError,
    acquire_seed,
    generate_fractal,
    iterate_points,
    main,
    render,
)
from fractal.config import ChaosConfig
from fractal.geometry import build_regular_polygon, contains


def black_mask(img):
    return np.all(img == 0, axis=2)


def test_acquire_seed_inside_polygon():
    rng = np.random.default_rng(0)
    polygon, _ = build_regular_polygon(6, 200, (200, 200))
    seed, attempts = acquire_seed(polygon, 400, 400, rng)
    assert contains(polygon, seed)
    assert attempts >= 1
    # 정수 좌표에서 뽑음
    assert seed[0] == int(seed[0]) and seed[1] == int(seed[1])


def test_acquire_seed_gives_up_after_max_attempts():
    rng = np.random.default_rng(0)
    # 1x1 캔버스에서 뽑을 수 있는 점은 (0, 0)뿐이고 다각형 밖에 있음
    polygon, _ = build_regular_polygon(6, 0.4, (0.5, 0.5))
    with pytest.raises(SeedAcquisitionError, match='5'):
        acquire_seed(polygon, 1, 1, rng, max_attempts=5)


def test_iterate_points_count():
    rng = np.random.default_rng(1)
    _, vertices = build_regular_polygon(5, 100, (100, 100))
    points = list(iterate_points(vertices, (100.0, 100.0), 1 / 6, 1234, rng))
    assert len(points) == 1234


def test_iterate_points_moves_from_vertex_toward_current():
    rng = np.random.default_rng(2)
    vertices = [(0.0, 0.0)]
    points = list(iterate_points(vertices, (60.0, 0.0), 1 / 6, 2, rng))
    assert np.allclose(points[0], (10.0, 0.0))
    assert np.allclose(points[1], (10.0 / 6, 0.0))


def test_fraction_zero_lands_on_vertices():
    rng = np.random.default_rng(3)
    _, vertices = build_regular_polygon(4, 50, (50, 50))
    points = list(iterate_points(vertices, (50.0, 50.0), 0.0, 200, rng))
    assert all(p in vertices for p in points)
    # 꼭짓점이 고르게 선택됨
    assert len(set(points)) == 4


def test_fraction_one_stays_at_seed():
    rng = np.random.default_rng(4)
    _, vertices = build_regular_polygon(3, 50, (50, 50))
    points = list(iterate_points(vertices, (40.0, 45.0), 1.0, 50, rng))
    assert np.allclose(points, [(40.0, 45.0)] * 50)


def test_hexagon_end_to_end(tmp_path):
    output = str(tmp_path / 'fractal.png')
    config = ChaosConfig(side_count=6, iterations=100000, fraction=1 / 6, seed=7, output=output)
    canvas, points, path = generate_fractal(config, verbose=False)
    assert path == output
    assert points.shape == (100000, 2)

    img = cv2.imread(output)
    assert img is not None
    assert img.shape == (401, 401, 3)
    assert np.array_equal(img, canvas)

    # 다각형 밖의 모서리는 배경색
    for row, col in [(0, 0), (0, 400), (400, 0), (400, 400)]:
        assert tuple(img[row, col]) == (255, 255, 255)

    mask = black_mask(img)
    assert mask.sum() > 1000
    # 첫 꼭짓점 (400, 200) 근처에 점이 찍힘
    assert mask[170:231, 360:401].any()
    # 모든 검은 픽셀은 다각형 안 (절삭으로 인한 1픽셀 오차 허용)
    polygon, _ = build_regular_polygon(6, 200, (200, 200))
    rows, cols = np.nonzero(mask)
    for r, c in zip(rows[::97], cols[::97]):
        assert cv2.pointPolygonTest(polygon, (float(c), float(r)), True) >= -1.5


def test_zero_iterations_is_blank(tmp_path):
    output = str(tmp_path / 'blank.png')
    config = ChaosConfig(iterations=0, seed=11, output=output)
    canvas, points, _ = generate_fractal(config, verbose=False)
    assert points.shape == (0, 2)
    img = cv2.imread(output)
    assert img.shape == (401, 401, 3)
    assert np.all(img == 255)


def test_sierpinski_triangle_leaves_central_hole():
    config = ChaosConfig(side_count=3, fraction=0.5, iterations=100000, seed=5)
    canvas, points = render(config)

    _, (a, b, c) = build_regular_polygon(3, 200, (200, 200))
    mid = lambda p, q: ((p[0] + q[0]) / 2, (p[1] + q[1]) / 2)
    hole = np.array([mid(a, b), mid(b, c), mid(c, a)], dtype=np.float32)

    # 초기 과도 구간 이후의 점은 가운데 역삼각형 내부에 들어가지 않음
    settled = points[30:]
    depth = np.array([cv2.pointPolygonTest(hole, (float(x), float(y)), True) for x, y in settled])
    assert np.all(depth < 1.0)

    # 균일하게 채워지지 않음: 검은 픽셀 수가 삼각형 넓이보다 훨씬 적음
    triangle_area = 3 * np.sqrt(3) / 4 * 200 ** 2
    filled = black_mask(canvas).sum()
    assert 1000 < filled < 0.6 * triangle_area


@pytest.mark.parametrize("sides", [3, 4, 5, 6, 7, 8])
def test_full_radius_stays_in_bounds(sides):
    config = ChaosConfig(side_count=sides, iterations=20000, seed=sides)
    assert config.resolved_radius == 200
    canvas, points = render(config)
    assert np.all(points >= 0)
    assert np.all(points < 401)
    assert black_mask(canvas).any()


def test_same_seed_is_reproducible():
    config = ChaosConfig(iterations=5000, seed=123)
    first, _ = render(config)
    second, _ = render(config)
    assert np.array_equal(first, second)


def test_explicit_rng_overrides_config_seed():
    config = ChaosConfig(iterations=3000, seed=1)
    first, _ = render(config, rng=np.random.default_rng(99))
    second, _ = render(config, rng=np.random.default_rng(99))
    assert np.array_equal(first, second)


def test_non_square_canvas():
    config = ChaosConfig(width=300, height=200, iterations=2000, seed=2)
    canvas, _ = render(config)
    assert canvas.shape == (201, 301, 3)


def test_verbose_reports_seed(capsys):
    render(ChaosConfig(iterations=10, seed=0), verbose=True)
    assert '시작점' in capsys.readouterr().out


def test_main_writes_png(tmp_path, capsys):
    output = tmp_path / 'cli.png'
    main(['--iterations', '2000', '--seed', '3', '--sides', '5', '--output', str(output)])
    assert output.exists()
    assert cv2.imread(str(output)).shape == (401, 401, 3)
    assert str(output) in capsys.readouterr().out


def test_main_rejects_bad_config(tmp_path):
    with pytest.raises(SystemExit):
        main(['--sides', '2', '--output', str(tmp_path / 'x.png')])
    assert not (tmp_path / 'x.png').exists()


def test_main_reports_write_failure(tmp_path):
    with pytest.raises(SystemExit, match='프랙탈 생성 실패'):
        main(['--iterations', '10', '--output', str(tmp_path / 'missing' / 'x.png')])


def test_main_preview(tmp_path):
    output = tmp_path / 'fractal.png'
    preview = tmp_path / 'preview.png'
    main(['--iterations', '1000', '--seed', '1', '--output', str(output), '--preview', str(preview)])
    assert output.exists()
    assert preview.exists()
    assert cv2.imread(str(preview)) is not None

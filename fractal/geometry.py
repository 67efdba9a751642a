"""정다각형 꼭짓점 계산과 다각형 내부 판정.

점은 (x, y) 튜플, 다각형은 OpenCV 윤곽선 형식의 float32 배열 (N, 2)입니다.
"""

import cv2
import numpy as np

from .config import ConfigError


def vertex_position(index, side_count, radius, center):
    """정n각형의 index번째 꼭짓점 좌표를 반환합니다.

    각도 = 2π·index/side_count, 중심 center, 반지름 radius인 원 위의 점.
    """
    angle = 2 * np.pi * index / side_count
    x = center[0] + radius * np.cos(angle)
    y = center[1] + radius * np.sin(angle)
    return float(x), float(y)


def build_regular_polygon(side_count, radius, center):
    """정n각형을 생성합니다.

    Args:
        side_count: 변의 개수 (3 이상)
        radius: 외접원 반지름 (양수)
        center: 중심 좌표 (cx, cy)

    Returns:
        (윤곽선 배열 (N, 2) float32, 꼭짓점 튜플 리스트)
        리스트는 카오스 게임에서 인덱스로 꼭짓점을 고를 때 사용합니다.
    """
    if side_count < 3:
        raise ConfigError(f'변의 개수는 3 이상이어야 합니다: side_count={side_count}')
    if radius <= 0:
        raise ConfigError(f'반지름은 양수여야 합니다: radius={radius}')

    # 각도가 증가하는 순서 -> 자기교차 없는 단순 다각형
    vertices = [vertex_position(i, side_count, radius, center) for i in range(side_count)]
    polygon = np.array(vertices, dtype=np.float32)
    return polygon, vertices


def point_on_fraction(point_a, point_b, fraction):
    """point_a에서 point_b 방향으로 fraction만큼 이동한 점.

    fraction은 클램프하지 않습니다 (0 미만, 1 초과도 그대로 계산).
    """
    x = point_a[0] + fraction * (point_b[0] - point_a[0])
    y = point_a[1] + fraction * (point_b[1] - point_a[1])
    return x, y


def contains(polygon, point):
    """점이 다각형 내부에 있는지 검사합니다.

    cv2.pointPolygonTest 결과가 +1(내부)일 때만 True.
    경계 위(0)는 내부로 보지 않으므로 시작점 샘플링에서 다시 뽑습니다.
    """
    result = cv2.pointPolygonTest(polygon, (float(point[0]), float(point[1])), False)
    return result > 0


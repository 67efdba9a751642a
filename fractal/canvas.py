"""픽셀 캔버스: 배경 초기화, 점 찍기, PNG 저장."""

import os

import cv2
import numpy as np

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class PlotOutOfBoundsError(IndexError):
    """계산된 점이 캔버스 밖에 떨어짐 (기하 설정 오류)."""


def init_canvas(width, height, background=WHITE):
    """width x height 크기, 모든 픽셀이 background인 BGR 캔버스."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:, :] = background
    return img


def plot(canvas, point, color=BLACK):
    """point가 속한 픽셀(내림)에 color를 씁니다.

    범위를 벗어나면 클램프하지 않고 PlotOutOfBoundsError를 발생시킵니다.
    """
    height, width = canvas.shape[:2]
    px = int(np.floor(point[0]))
    py = int(np.floor(point[1]))
    if not (0 <= px < width and 0 <= py < height):
        raise PlotOutOfBoundsError(
            f'픽셀 ({px}, {py})이 캔버스 {width}x{height} 범위를 벗어났습니다 (point={point})'
        )
    canvas[py, px] = color


def save_png(canvas, path):
    """캔버스를 PNG로 저장합니다. 실패하면 OSError."""
    directory = os.path.dirname(path)
    if directory and not os.path.isdir(directory):
        raise OSError(f'출력 디렉터리가 없습니다: {directory}')
    try:
        ok = cv2.imwrite(path, canvas)
    except cv2.error as e:
        raise OSError(f'PNG 저장 실패: {path} ({e})') from e
    if not ok:
        raise OSError(f'PNG 저장 실패: {path}')
    return path

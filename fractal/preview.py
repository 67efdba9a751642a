"""생성된 점 분포를 matplotlib 산점도로 저장합니다 (다각형 윤곽 포함)."""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np


def save_preview(points, polygon, output_path, image_size=None):
    """점 분포와 다각형 윤곽을 그려 PNG로 저장합니다.

    Args:
        points: (N, 2) 점 배열
        polygon: (M, 2) 꼭짓점 배열
        output_path: 저장 경로
        image_size: (가로, 세로) - 주어지면 축 범위를 이미지 크기에 맞춤
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    verts = np.asarray(polygon, dtype=float).reshape(-1, 2)
    closed = np.vstack([verts, verts[:1]])

    fig, ax = plt.subplots(figsize=(6, 6))
    if len(pts) > 0:
        ax.scatter(pts[:, 0], pts[:, 1], s=0.1, c='k', marker='.')
    ax.plot(closed[:, 0], closed[:, 1], 'r-', linewidth=1, label='polygon')
    ax.scatter(verts[:, 0], verts[:, 1], color='r', s=20)
    if image_size is not None:
        ax.set_xlim(0, image_size[0])
        ax.set_ylim(image_size[1], 0)  # 이미지 좌표계 (y 아래로)
    else:
        ax.invert_yaxis()
    ax.set_aspect('equal')
    ax.set_title(f'Chaos game: {len(verts)} vertices, {len(pts)} points')
    ax.legend(loc='upper right')
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output_path

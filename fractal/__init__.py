"""카오스 게임 프랙탈 생성기."""

from .canvas import PlotOutOfBoundsError, init_canvas, plot, save_png
from .chaos_game import SeedAcquisitionError, acquire_seed, generate_fractal, iterate_points, render
from .config import ChaosConfig, ConfigError
from .geometry import build_regular_polygon, contains, point_on_fraction, vertex_position

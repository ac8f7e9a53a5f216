# renderer/raytracer.py
import logging
import math
import os
import time
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial

import numpy as np
from tqdm import tqdm

from raytrace.camera.camera import Camera
from raytrace.config import T_MIN, ExecutorKind, RenderConfig, RowOrder
from raytrace.core.ray import Ray
from raytrace.core.sampling import Sampler, fresh_entropy
from raytrace.core.vector import Color
from raytrace.geometry.hittable import Hittable
from raytrace.renderer.tone_mapping import gamma_quantize

logger = logging.getLogger(__name__)

SKY_WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Color:
    """
    Background seen by rays that escape the scene: a vertical gradient
    from white at the horizon to light blue overhead.
    """
    unit_direction = ray.direction.unit()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE.lerp(SKY_BLUE, t)


def trace(ray: Ray, world: Hittable, depth: int, sampler: Sampler,
          t_min: float = T_MIN) -> Color:
    """
    Returns the color carried back along ray.

    depth is the number of bounces left; at 0 the path contributes black.
    t_min keeps a scattered ray from hitting the surface it starts on.
    """
    attenuation = Color.white()
    for _ in range(depth):
        rec = world.intersect(ray, t_min, math.inf)
        if rec is None:
            return attenuation * sky_color(ray)

        scattered = rec.material.scatter(ray, rec, sampler)
        if scattered is None:
            return Color.black()
        attenuation = attenuation * scattered.attenuation
        ray = scattered.ray

    # Bounce budget exhausted
    return Color.black()


def render_pixel(world: Hittable, camera: Camera, col: int, row: int,
                 config: RenderConfig, sampler: Sampler) -> Color:
    """
    Sums samples_per_pixel jittered traces through pixel (col, row).
    row counts up from the bottom of the viewport. The sum is not averaged.
    """
    total = Color.black()
    for _ in range(config.samples_per_pixel):
        u = (col + sampler.uniform()) / config.width
        v = (row + sampler.uniform()) / config.height
        ray = camera.get_ray(u, v, sampler)
        total = total + trace(ray, world, config.max_depth, sampler)
    return total


def render_row(world: Hittable, camera: Camera, config: RenderConfig,
               seed: int, row: int) -> np.ndarray:
    """
    Renders one viewport row with its own sampler.

    Returns a (width, 3) array of per-pixel color sums.
    """
    sampler = Sampler.for_row(seed, row)
    sums = np.zeros((config.width, 3), dtype=np.float64)
    for col in range(config.width):
        sums[col] = tuple(render_pixel(world, camera, col, row, config, sampler))
    return sums


class Renderer:
    """
    Renders a world through a camera into an 8-bit RGB grid.

    Rows are distributed over a worker pool. Every row seeds its own sampler
    from the root seed and its index, so a fixed seed gives the same image
    for any number of workers or executor kind.

    With progress=True a tqdm bar advances as rows complete.
    """
    def __init__(self, config: RenderConfig, progress: bool = False):
        self.config = config
        self.progress = progress

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Returns a (height, width, 3) uint8 array in the configured row order.
        """
        accumulation = self.accumulate(world, camera)
        return gamma_quantize(accumulation, self.config.samples_per_pixel)

    def accumulate(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Returns the (height, width, 3) buffer of per-pixel color sums,
        before averaging and gamma correction.
        """
        config = self.config
        seed = config.seed if config.seed is not None else fresh_entropy()
        logger.info(
            "Rendering %dx%d, %d samples/pixel, depth %d, seed %d",
            config.width, config.height, config.samples_per_pixel, config.max_depth, seed,
        )
        start = time.perf_counter()

        accumulation = np.zeros((config.height, config.width, 3), dtype=np.float64)
        task = partial(render_row, world, camera, config, seed)
        rows = range(config.height)

        if config.workers == 1:
            results = map(task, rows)
            self._collect(accumulation, results)
        else:
            with self._make_executor() as executor:
                results = executor.map(task, rows, chunksize=self._chunksize())
                self._collect(accumulation, results)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return accumulation

    def _collect(self, accumulation: np.ndarray, results) -> None:
        height = self.config.height
        results = tqdm(results, total=height, desc="Rendering", unit="row",
                       disable=not self.progress)
        for row, sums in enumerate(results):
            if self.config.row_order is RowOrder.TOP_DOWN:
                accumulation[height - 1 - row] = sums
            else:
                accumulation[row] = sums
            logger.debug("Row %d/%d done", row + 1, height)

    def _chunksize(self) -> int:
        # Process workers unpickle the world once per chunk of rows
        if self.config.executor is not ExecutorKind.PROCESS:
            return 1
        workers = self.config.workers or os.cpu_count() or 1
        return max(1, self.config.height // (workers * 4))

    def _make_executor(self) -> Executor:
        if self.config.executor is ExecutorKind.PROCESS:
            return ProcessPoolExecutor(max_workers=self.config.workers)
        return ThreadPoolExecutor(max_workers=self.config.workers)

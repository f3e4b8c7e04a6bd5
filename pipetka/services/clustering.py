"""
Clustering — K-means quantization of sampled pixel colors.

One implementation backs every palette tool; the variants differ only in
how cluster weights are computed and whether the result is sorted:

  exact    share of pixels assigned to each centroid after convergence
  sampled  nearest-centroid votes from at most 1000 evenly strided pixels
  uniform  n // k for every cluster (cheapest, ignores the data)

Algorithm:
  1. Seed k centroids with distinct colors drawn at random from the input
  2. Assign each pixel to its nearest centroid (RGB Euclidean)
  3. Move each centroid to the rounded mean of its pixels; empty clusters
     keep their previous centroid
  4. Repeat up to max_iterations, stopping once no centroid moves further
     than tolerance

Seeding is random unless a seeded numpy Generator is passed in.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from .color_utils import Rgb, rgb_to_hex, round_half_up

logger = logging.getLogger(__name__)

WEIGHTINGS = ("exact", "sampled", "uniform")
DEFAULT_MAX_ITERATIONS = 10
DEFAULT_TOLERANCE = 1.0
SAMPLED_WEIGHT_SIZE = 1000

PixelInput = Union[np.ndarray, Sequence[Sequence[float]]]


@dataclass(frozen=True)
class ColorCluster:
    rgb: Rgb
    percentage: float
    count: int = 0

    @property
    def hex(self) -> str:
        return rgb_to_hex(*self.rgb)


def as_pixel_array(pixels: PixelInput) -> np.ndarray:
    """Coerce pixels (list of triples, (n, 3) or (h, w, 3|4) array) to float (n, 3)."""
    arr = np.asarray(pixels, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.shape[-1] == 4:
        arr = arr[..., :3]
    return np.clip(arr.reshape(-1, 3), 0, 255)


def nearest_centroid(pixels: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Index of the nearest centroid for every pixel; lowest index wins ties."""
    diff = pixels[:, None, :] - centroids[None, :, :]
    return np.einsum("nkc,nkc->nk", diff, diff).argmin(axis=1)


def update_centroids(data: np.ndarray, labels: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Rounded mean of each cluster's members; a cluster with no members keeps its centroid."""
    updated = centroids.copy()
    for i in range(len(centroids)):
        members = data[labels == i]
        if len(members) == 0:
            continue
        updated[i] = np.floor(members.mean(axis=0) + 0.5)
    return updated


def kmeans(
    pixels: PixelInput,
    k: int,
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: Optional[float] = DEFAULT_TOLERANCE,
    weighting: str = "exact",
    sort_by_weight: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> list[ColorCluster]:
    """
    Partition pixel colors into at most k representative colors.

    Returns min(k, number of distinct colors) clusters, in seeding order
    unless sort_by_weight is set. tolerance=None disables early stopping.
    """
    if weighting not in WEIGHTINGS:
        raise ValueError(f"Unknown weighting '{weighting}', expected one of {WEIGHTINGS}")

    data = as_pixel_array(pixels)
    n = len(data)
    if n == 0 or k <= 0:
        return []

    rng = rng if rng is not None else np.random.default_rng()

    distinct = np.unique(data, axis=0)
    k = min(k, len(distinct))
    seeds = rng.choice(len(distinct), size=k, replace=False)
    centroids = distinct[seeds].copy()

    iterations_run = 0
    for _ in range(max_iterations):
        iterations_run += 1
        labels = nearest_centroid(data, centroids)
        updated = update_centroids(data, labels, centroids)

        shifts = np.linalg.norm(updated - centroids, axis=1)
        centroids = updated
        if tolerance is not None and not (shifts > tolerance).any():
            break

    logger.debug(f"kmeans k={k} n={n} converged after {iterations_run} iteration(s)")

    percentages, counts = _weights(data, centroids, weighting)
    clusters = [
        ColorCluster(
            rgb=Rgb(int(c[0]), int(c[1]), int(c[2])),
            percentage=float(p),
            count=int(cnt),
        )
        for c, p, cnt in zip(centroids, percentages, counts)
    ]

    if sort_by_weight:
        clusters = sorted(clusters, key=lambda c: c.percentage, reverse=True)
    return clusters


def _weights(
    data: np.ndarray,
    centroids: np.ndarray,
    weighting: str,
) -> tuple[np.ndarray, np.ndarray]:
    n = len(data)
    k = len(centroids)

    if weighting == "uniform":
        size = max(1, n // k)
        pct = round_half_up(size / n * 100)
        return np.full(k, float(pct)), np.zeros(k, dtype=int)

    if weighting == "sampled":
        sample_size = min(SAMPLED_WEIGHT_SIZE, n)
        step = n // sample_size
        sample = data[np.arange(sample_size) * step]
    else:
        sample = data

    counts = np.bincount(nearest_centroid(sample, centroids), minlength=k)
    total = counts.sum()
    if total == 0:
        return np.zeros(k), counts
    return counts / total * 100, counts

"""
Raster image alignment.

PNG math is sized in ex units so it scales with the surrounding text. The
pixels-per-ex factor is measured once per process by rendering a probe
character with the configured PNG engine and reused for every later image.
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict

from texmark.contexts.document.nodes import MathKind
from texmark.contexts.math.backends import RasterImage
from texmark.contexts.math.exceptions import BaselineProbeError
from texmark.contexts.math.logger import _log_info
from texmark.contexts.math.renderer import MathRenderer

# Probe rendered to measure the height of one ex
PROBE_SOURCE = "x"


class BaselineMetric:
    """
    Compute-once pixels-per-ex value.

    The first caller computes the value under a lock; once set it is read
    without locking and never invalidated.
    """

    def __init__(self):
        self._value = None
        self._lock = threading.Lock()

    @property
    def is_computed(self) -> bool:
        return self._value is not None

    def get(self, compute: Callable[[], float]) -> float:
        """
        Return the cached value, computing it on first use.

        Args:
            compute: Called at most once (per successful computation)

        Raises:
            BaselineProbeError: If compute yields a non-positive value
        """
        value = self._value
        if value is not None:
            return value

        with self._lock:
            if self._value is None:
                value = float(compute())
                if value <= 0:
                    raise BaselineProbeError(f"Baseline probe produced non-positive height {value}")
                self._value = value
            return self._value


# Shared by every aligner in the process
PIXELS_PER_EX = BaselineMetric()


def format_ex(value: float) -> str:
    """Format a length in ex with at most three decimals (2.5 -> '2.5ex', 2.0 -> '2ex')."""
    # `or 0.0` folds -0.0 into 0.0
    digits = f"{round(value, 3) or 0.0:.3f}".rstrip("0").rstrip(".")
    return f"{digits}ex"


@dataclass(frozen=True)
class AlignedImage:
    """
    Image element descriptor for rasterized math.

    Attributes:
        src: Image URI
        alt: TeX source wrapped in $...$
        height_ex: Height above the baseline in ex
        depth_ex: Depth below the baseline in ex
        style: CSS declarations in output order
    """

    src: str
    alt: str
    height_ex: float
    depth_ex: float
    style: Dict[str, str] = field(default_factory=dict)

    @property
    def css(self) -> str:
        return " ".join(f"{prop}: {value};" for prop, value in self.style.items())


class ImageAligner:
    """
    Convert raster pixel metrics into ex-based styling.

    Args:
        renderer: Renderer whose PNG engine renders the baseline probe
        metric: Baseline cache (process-wide by default)
    """

    def __init__(self, renderer: MathRenderer, metric: BaselineMetric = PIXELS_PER_EX):
        self.renderer = renderer
        self.metric = metric

    def pixels_per_ex(self) -> float:
        return self.metric.get(self._probe)

    def align(self, image: RasterImage, source: str, use_depth: bool) -> AlignedImage:
        """
        Compute size and vertical alignment of a rendered image.

        Args:
            image: Raster result with pixel height and depth
            source: TeX source, used for the alt text
            use_depth: Shift the image below the baseline by its depth (inline math)

        Returns:
            AlignedImage with height (and vertical-align when use_depth) in ex
        """
        baseline = self.pixels_per_ex()
        height_ex = image.height / baseline
        depth_ex = image.depth / baseline

        style = {"height": format_ex(height_ex + depth_ex)}
        if use_depth:
            style["vertical-align"] = format_ex(-depth_ex)

        return AlignedImage(
            src=image.src,
            alt=f"${source.strip()}$",
            height_ex=height_ex,
            depth_ex=depth_ex,
            style=style,
        )

    def _probe(self) -> float:
        probe = self.renderer.render_png(MathKind.INLINE, PROBE_SOURCE)
        if probe is None or probe.height <= 0:
            raise BaselineProbeError(
                f"PNG engine '{self.renderer.options.png_engine}' cannot render the "
                f"baseline probe {PROBE_SOURCE!r}"
            )
        _log_info(f"Measured baseline: {probe.height} px per ex")
        return probe.height

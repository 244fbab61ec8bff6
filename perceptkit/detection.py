"""Target selection and 3-D localisation from detector boxes and an aligned depth image."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

DEFAULT_TARGET_INDEX = 1
DEFAULT_SCALE = 0.6
DEFAULT_MAX_X = 768
DEFAULT_MAX_Y = 432
DEPTH_UNIT = 0.001
_RESULT_LIMIT = 16300


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class DetectBox:
    """An axis-aligned detection with class, confidence and track identity."""

    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    confidence: float = 0.0
    class_id: float = -1.0
    track_id: float = -1.0


@dataclass(frozen=True)
class CameraIntrinsics:
    """Pinhole focal lengths and principal point, in pixels."""

    fx: float
    fy: float
    cx: float
    cy: float

    @classmethod
    def from_k(cls, k: Sequence[float]) -> "CameraIntrinsics":
        """Build from a row-major 3x3 camera matrix given as nine numbers."""
        if len(k) != 9:
            raise ValueError(f"Camera matrix needs 9 entries, got {len(k)}")
        return cls(fx=float(k[0]), fy=float(k[4]), cx=float(k[2]), cy=float(k[5]))


@dataclass
class TargetPoint:
    """A target position in metres; ``flag`` tells whether it is valid."""

    flag: bool = False
    x: float = 0.0
    y: float = 0.0
    z: float = -1.0


@dataclass(frozen=True)
class Detection:
    """One detector result in image pixels."""

    class_id: int
    x1: int
    y1: int
    x2: int
    y2: int


class TargetNotFoundError(LookupError):
    """Raised when a requested target does not exist."""


def _pixel(depth: Any, row: int, col: int) -> float:
    if row < 0 or row >= len(depth):
        raise IndexError(f"Depth row {row} is outside the image")
    line = depth[row]
    if col < 0 or col >= len(line):
        raise IndexError(f"Depth column {col} is outside the image")
    return float(line[col])


def depth_at_box(depth: Any, x1: int, y1: int, x2: int, y2: int) -> float:
    """Mean raw depth at three reference points in the upper part of a box."""
    row = int(_f32(0.8 * y1 + 0.2 * y2))
    columns = (
        int(_f32(0.5 * x1 + 0.5 * x2)),
        int(_f32(0.6 * x1 + 0.4 * x2)),
        int(_f32(0.4 * x1 + 0.6 * x2)),
    )
    return sum(_pixel(depth, row, col) for col in columns) / 3


def locate_target(box: DetectBox, depth: Any, intrinsics: CameraIntrinsics) -> TargetPoint:
    """Back-project the box centre into camera coordinates using the depth image."""
    centre_x = (box.x1 + box.x2) / 2
    centre_y = (box.y1 + box.y2) / 2
    z = depth_at_box(depth, int(box.x1), int(box.y1), int(box.x2), int(box.y2)) * DEPTH_UNIT
    x = (centre_x - intrinsics.cx) / intrinsics.fx * z
    y = -(centre_y - intrinsics.cy) / intrinsics.fy * z
    if z == 0:
        return TargetPoint(flag=False, x=x, y=y, z=-1.0)
    return TargetPoint(flag=True, x=x, y=y, z=z)


def select_target(
    boxes: Iterable[DetectBox], target_index: int = DEFAULT_TARGET_INDEX
) -> Optional[DetectBox]:
    """The ``target_index``-th box of class 0, counted from zero, or ``None``."""
    people = (box for box in boxes if box.class_id == 0)
    return next((box for i, box in enumerate(people) if i == target_index), None)


def track_frame(
    boxes: Sequence[DetectBox],
    depth: Any,
    intrinsics: CameraIntrinsics,
    target_index: int = DEFAULT_TARGET_INDEX,
) -> Tuple[TargetPoint, DetectBox]:
    """Locate the chosen target in one frame and return its point and bounding box.

    With no detections the box is all -1 and the depth -1; with detections
    but no matching target both point and box are all zero.
    """
    if not boxes:
        return TargetPoint(), DetectBox(-1.0, -1.0, -1.0, -1.0)
    target = select_target(boxes, target_index)
    if target is None:
        return TargetPoint(z=0.0), DetectBox()
    point = locate_target(target, depth, intrinsics)
    return point, DetectBox(target.x1, target.y1, target.x2, target.y2)


def _clamp(value: float, upper: float) -> float:
    return float(min(max(int(value), 0), upper))


def scale_box(
    box: DetectBox,
    factor: float = DEFAULT_SCALE,
    max_x: float = DEFAULT_MAX_X,
    max_y: float = DEFAULT_MAX_Y,
) -> DetectBox:
    """Scale box corners, truncate them to whole pixels and clamp them to the image."""
    return DetectBox(
        x1=_clamp(box.x1 * factor, max_x),
        y1=_clamp(box.y1 * factor, max_y),
        x2=_clamp(box.x2 * factor, max_x),
        y2=_clamp(box.y2 * factor, max_y),
        class_id=box.class_id,
    )


def collect_targets(
    boxes: Iterable[DetectBox],
    factor: float = DEFAULT_SCALE,
    max_x: float = DEFAULT_MAX_X,
    max_y: float = DEFAULT_MAX_Y,
) -> List[DetectBox]:
    """Scaled boxes of every class-0 detection, in detection order."""
    return [scale_box(box, factor, max_x, max_y) for box in boxes if box.class_id == 0]


def format_detections(
    detections: Sequence[Detection], delay_preprocess: int, delay_infer: int
) -> str:
    """Render detector output as the engine's result string.

    Objects stop being added once the text reaches the result size limit;
    ``num_det`` still reports every detection.
    """
    text = (
        f'{{"delay_preprocess": {int(delay_preprocess)},'
        f'"delay_infer": {int(delay_infer)},'
        f'"num_det":{len(detections)}, "objects":['
    )
    for i, det in enumerate(detections):
        separator = "," if i else ""
        text += f"{separator}({det.class_id},{det.x1},{det.y1},{det.x2},{det.y2})"
        if len(text) >= _RESULT_LIMIT:
            break
    return text + "]}"


@dataclass
class TargetService:
    """Answers requests for the position of a numbered target found in a frame."""

    targets: List[DetectBox]
    depth: Any
    intrinsics: CameraIntrinsics
    image: Any = None
    requests: List[int] = field(default_factory=list)

    def request(self, num: int) -> Tuple[TargetPoint, DetectBox]:
        """Point and box of target ``num``, counted from one."""
        self.requests.append(num)
        if not self.targets:
            raise TargetNotFoundError("no target found")
        index = num - 1
        if index < 0 or index >= len(self.targets):
            raise TargetNotFoundError("num is out of range")
        box = self.targets[index]
        point = locate_target(box, self.depth, self.intrinsics)
        return point, DetectBox(box.x1, box.y1, box.x2, box.y2)
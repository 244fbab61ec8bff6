# perceptkit

Building blocks for a small robot perception stack, in pure Python with no
third-party dependencies.

## What is inside

- **`perceptkit.detection`**: `DetectBox`, `CameraIntrinsics`, `TargetPoint`
  and `Detection`, with helpers that turn a detection box and an aligned depth
  image into a 3-D target point: `depth_at_box`, `locate_target`,
  `select_target`, `track_frame`, `scale_box`, `collect_targets` and
  `format_detections`. `TargetService` answers requests for a numbered target
  and raises `TargetNotFoundError` when there is none.
- **`perceptkit.messages`**: config message records (`Config`,
  `ConfigDescription`, `IntParameter`, `DoubleParameter`, `BoolParameter`,
  `StrParameter`, `GroupState`, `Group`, `ParamDescription`).
  `Config.same_values` compares the int, double and bool entries of two
  configs, treating doubles as equal when they differ by less than machine
  epsilon.
- **`perceptkit.trtlog`**: a severity-filtered `Logger` with timestamped,
  prefixed output, `LogStreamConsumer` message buffers (`log_verbose`,
  `log_info`, `log_warn`, `log_error`, `log_fatal`) and test-result reporting
  with `TestAtom` and `TestResult`.
- **`perceptkit.camera_constants`**: depth-camera defaults, USB product ids
  (`product_id_name`), `version_string`, `StreamType` and `StreamIndex`, and
  the image and HID stream sets (`is_image_stream`, `is_hid_stream`).

## Locating a target

```python
from perceptkit.detection import CameraIntrinsics, DetectBox, locate_target

# Row-major 3x3 camera matrix K: fx, 0, cx, 0, fy, cy, 0, 0, 1
intrinsics = CameraIntrinsics.from_k([600.0, 0, 320.0, 0, 600.0, 240.0, 0, 0, 1])

# Depth image in millimetres, one row per image row
depth = [[1500] * 640 for _ in range(480)]

box = DetectBox(x1=300, y1=200, x2=340, y2=280, confidence=0.9, class_id=0)
point = locate_target(box, depth, intrinsics)
print(point)
```

Depth is sampled at three points across the upper part of the box and
averaged, then converted to metres. A zero depth gives a point with
`flag=False` and `z=-1.0`. A sample point outside the depth image raises
`IndexError`.

`track_frame(boxes, depth, intrinsics, target_index)` picks the
`target_index`-th class-0 box (counted from zero, default 1) and returns its
point and box. `collect_targets` scales every class-0 box (by 0.6 by default),
truncates it to whole pixels and clamps it to 768 x 432; a `TargetService`
built from those boxes answers `request(num)` with targets counted from one.

## Logging

```python
from perceptkit.trtlog import Logger, Severity

logger = Logger()
logger.log(Severity.WARNING, "engine file not found")
```

The timestamp goes to standard output; the tagged message goes to standard
output for INFO and VERBOSE and to standard error for more severe levels.
Messages less severe than the logger's reportable severity (WARNING by
default) are dropped.

## What the package does not do

It holds no runtime parameter registry: the config message records are
provided, but nothing here registers variables, serves a `set_parameters`
request or publishes parameter updates. There is no camera driver, detector
or inference engine either; boxes, depth images and camera matrices must come
from elsewhere.
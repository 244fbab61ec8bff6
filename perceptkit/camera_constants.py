"""Depth-camera identifiers, stream indices and the node's default settings."""

from __future__ import annotations

import enum
from typing import Dict, NamedTuple, Tuple

MAJOR_VERSION = 2
MINOR_VERSION = 3
PATCH_VERSION = 2


def version_string() -> str:
    """The node version in ``X.Y.Z`` form."""
    return f"{MAJOR_VERSION}.{MINOR_VERSION}.{PATCH_VERSION}"


SR300_PID = 0x0AA5
SR300v2_PID = 0x0B48
RS400_PID = 0x0AD1
RS410_PID = 0x0AD2
RS415_PID = 0x0AD3
RS430_PID = 0x0AD4
RS430_MM_PID = 0x0AD5
RS_USB2_PID = 0x0AD6
RS420_PID = 0x0AF6
RS420_MM_PID = 0x0AFE
RS410_MM_PID = 0x0AFF
RS400_MM_PID = 0x0B00
RS430_MM_RGB_PID = 0x0B01
RS460_PID = 0x0B03
RS435_RGB_PID = 0x0B07
RS435i_RGB_PID = 0x0B3A
RS465_PID = 0x0B4D
RS416_RGB_PID = 0x0B52
RS405_PID = 0x0B0C
RS455_PID = 0x0B5C
RS_T265_PID = 0x0B37
RS_L515_PID_PRE_PRQ = 0x0B3D
RS_L515_PID = 0x0B64
RS_L535_PID = 0x0B68

_PRODUCT_NAMES: Dict[int, str] = {
    SR300_PID: "SR300",
    SR300v2_PID: "SR300v2",
    RS400_PID: "RS400",
    RS410_PID: "RS410",
    RS415_PID: "RS415",
    RS430_PID: "RS430",
    RS430_MM_PID: "RS430_MM",
    RS_USB2_PID: "RS_USB2",
    RS420_PID: "RS420",
    RS420_MM_PID: "RS420_MM",
    RS410_MM_PID: "RS410_MM",
    RS400_MM_PID: "RS400_MM",
    RS430_MM_RGB_PID: "RS430_MM_RGB",
    RS460_PID: "RS460",
    RS435_RGB_PID: "RS435_RGB",
    RS435i_RGB_PID: "RS435i_RGB",
    RS465_PID: "RS465",
    RS416_RGB_PID: "RS416_RGB",
    RS405_PID: "RS405",
    RS455_PID: "RS455",
    RS_T265_PID: "RS_T265",
    RS_L515_PID_PRE_PRQ: "RS_L515_PRE_PRQ",
    RS_L515_PID: "RS_L515",
    RS_L535_PID: "RS_L535",
}

PRODUCT_IDS: Tuple[int, ...] = tuple(_PRODUCT_NAMES)


def product_id_name(pid: int) -> str:
    """The model name for a USB product id; unknown ids raise ``ValueError``."""
    try:
        return _PRODUCT_NAMES[pid]
    except KeyError:
        raise ValueError(f"Unknown product id 0x{pid:04x}") from None


ALIGN_DEPTH = False
POINTCLOUD = False
ALLOW_NO_TEXTURE_POINTS = False
ORDERED_POINTCLOUD = False
SYNC_FRAMES = False

PUBLISH_TF = True
TF_PUBLISH_RATE = 0.0

IMAGE_WIDTH = 640
IMAGE_HEIGHT = 480
IMAGE_FPS = 30

IMU_FPS = 0

ENABLE_DEPTH = True
ENABLE_INFRA1 = True
ENABLE_INFRA2 = True
ENABLE_COLOR = True
ENABLE_FISHEYE = True
ENABLE_IMU = True
HOLD_BACK_IMU_FOR_FRAMES = False
PUBLISH_ODOM_TF = True

DEFAULT_BASE_FRAME_ID = "camera_link"
DEFAULT_ODOM_FRAME_ID = "odom_frame"
DEFAULT_DEPTH_FRAME_ID = "camera_depth_frame"
DEFAULT_INFRA1_FRAME_ID = "camera_infra1_frame"
DEFAULT_INFRA2_FRAME_ID = "camera_infra2_frame"
DEFAULT_COLOR_FRAME_ID = "camera_color_frame"
DEFAULT_FISHEYE_FRAME_ID = "camera_fisheye_frame"
DEFAULT_IMU_FRAME_ID = "camera_imu_frame"

DEFAULT_DEPTH_OPTICAL_FRAME_ID = "camera_depth_optical_frame"
DEFAULT_INFRA1_OPTICAL_FRAME_ID = "camera_infra1_optical_frame"
DEFAULT_INFRA2_OPTICAL_FRAME_ID = "camera_infra2_optical_frame"
DEFAULT_COLOR_OPTICAL_FRAME_ID = "camera_color_optical_frame"
DEFAULT_FISHEYE_OPTICAL_FRAME_ID = "camera_fisheye_optical_frame"
DEFAULT_ACCEL_OPTICAL_FRAME_ID = "camera_accel_optical_frame"
DEFAULT_GYRO_OPTICAL_FRAME_ID = "camera_gyro_optical_frame"
DEFAULT_IMU_OPTICAL_FRAME_ID = "camera_imu_optical_frame"

DEFAULT_ALIGNED_DEPTH_TO_COLOR_FRAME_ID = "camera_aligned_depth_to_color_frame"
DEFAULT_ALIGNED_DEPTH_TO_INFRA1_FRAME_ID = "camera_aligned_depth_to_infra1_frame"
DEFAULT_ALIGNED_DEPTH_TO_INFRA2_FRAME_ID = "camera_aligned_depth_to_infra2_frame"
DEFAULT_ALIGNED_DEPTH_TO_FISHEYE_FRAME_ID = "camera_aligned_depth_to_fisheye_frame"

DEFAULT_UNITE_IMU_METHOD = ""
DEFAULT_FILTERS = ""
DEFAULT_TOPIC_ODOM_IN = ""

ROS_DEPTH_SCALE = 0.001


class StreamType(enum.IntEnum):
    """Kinds of data stream a camera produces."""

    ANY = 0
    DEPTH = 1
    COLOR = 2
    INFRARED = 3
    FISHEYE = 4
    GYRO = 5
    ACCEL = 6
    GPIO = 7
    POSE = 8
    CONFIDENCE = 9


class StreamIndex(NamedTuple):
    """A stream kind together with the sensor index that produces it."""

    stream: StreamType
    index: int = 0


COLOR = StreamIndex(StreamType.COLOR, 0)
DEPTH = StreamIndex(StreamType.DEPTH, 0)
INFRA0 = StreamIndex(StreamType.INFRARED, 0)
INFRA1 = StreamIndex(StreamType.INFRARED, 1)
INFRA2 = StreamIndex(StreamType.INFRARED, 2)
FISHEYE = StreamIndex(StreamType.FISHEYE, 0)
FISHEYE1 = StreamIndex(StreamType.FISHEYE, 1)
FISHEYE2 = StreamIndex(StreamType.FISHEYE, 2)
GYRO = StreamIndex(StreamType.GYRO, 0)
ACCEL = StreamIndex(StreamType.ACCEL, 0)
POSE = StreamIndex(StreamType.POSE, 0)
CONFIDENCE = StreamIndex(StreamType.CONFIDENCE, 0)

IMAGE_STREAMS: Tuple[StreamIndex, ...] = (
    DEPTH,
    INFRA0,
    INFRA1,
    INFRA2,
    COLOR,
    FISHEYE,
    FISHEYE1,
    FISHEYE2,
    CONFIDENCE,
)

HID_STREAMS: Tuple[StreamIndex, ...] = (GYRO, ACCEL, POSE)


def _as_index(stream: Tuple[int, int]) -> StreamIndex:
    kind, index = stream
    return StreamIndex(StreamType(kind), int(index))


def is_image_stream(stream: Tuple[int, int]) -> bool:
    """Whether the stream carries image frames."""
    return _as_index(stream) in IMAGE_STREAMS


def is_hid_stream(stream: Tuple[int, int]) -> bool:
    """Whether the stream carries motion or pose samples."""
    return _as_index(stream) in HID_STREAMS
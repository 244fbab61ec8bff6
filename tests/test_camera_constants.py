import pytest

from perceptkit import camera_constants as cc
from perceptkit.camera_constants import (
    StreamIndex,
    StreamType,
    is_hid_stream,
    is_image_stream,
    product_id_name,
    version_string,
)


def test_version_string():
    assert version_string() == "2.3.2"


def test_version_string_matches_parts():
    parts = version_string().split(".")
    assert [int(p) for p in parts] == [
        cc.MAJOR_VERSION,
        cc.MINOR_VERSION,
        cc.PATCH_VERSION,
    ]


def test_product_id_name_known():
    assert product_id_name(cc.RS435i_RGB_PID) == "RS435i_RGB"
    assert product_id_name(0x0B64) == "RS_L515"


def test_product_ids_unique_and_named():
    assert len(set(cc.PRODUCT_IDS)) == len(cc.PRODUCT_IDS)
    names = [product_id_name(pid) for pid in cc.PRODUCT_IDS]
    assert len(set(names)) == len(names)


@pytest.mark.parametrize("pid", [0x0000, 0xFFFF, 0x1234])
def test_product_id_name_unknown(pid):
    with pytest.raises(ValueError):
        product_id_name(pid)


@pytest.mark.parametrize("stream", list(cc.IMAGE_STREAMS))
def test_image_streams_are_not_hid(stream):
    assert is_image_stream(stream) is True
    assert is_hid_stream(stream) is False


@pytest.mark.parametrize("stream", list(cc.HID_STREAMS))
def test_hid_streams_are_not_image(stream):
    assert is_hid_stream(stream) is True
    assert is_image_stream(stream) is False


def test_plain_tuples_accepted():
    assert is_image_stream((2, 0)) is True
    assert is_hid_stream((int(StreamType.GYRO), 0)) is True


def test_unlisted_index_is_neither():
    stream = StreamIndex(StreamType.COLOR, 3)
    assert is_image_stream(stream) is False
    assert is_hid_stream(stream) is False


def test_invalid_stream_kind_raises():
    with pytest.raises(ValueError):
        is_image_stream((99, 0))


def test_stream_index_usable_as_key():
    table = {cc.INFRA1: "left", cc.INFRA2: "right"}
    assert table[StreamIndex(StreamType.INFRARED, 1)] == "left"
    assert cc.INFRA1 != cc.INFRA2


def test_default_image_settings():
    assert is_image_stream(StreamIndex(StreamType.COLOR, 0)) is True
    assert is_image_stream(StreamIndex(StreamType.DEPTH, 0)) is True
    assert (cc.IMAGE_WIDTH, cc.IMAGE_HEIGHT, cc.IMAGE_FPS) == (640, 480, 30)
    assert cc.DEFAULT_BASE_FRAME_ID == "camera_link"
    assert cc.ROS_DEPTH_SCALE == pytest.approx(0.001)
"""
Unit tests for request building and content fingerprints.
"""

import copy

import pytest

from inkscript.config import LANG_DE, LANG_EN, RecognitionConfig
from inkscript.models import MAX_HEIGHT, MAX_WIDTH, BrushType, Dot, Drawing, InkStroke, Layer
from inkscript.recognition.ink import convert_drawing
from inkscript.recognition.fingerprint import fingerprint
from inkscript.recognition.request import (
    PointerType,
    Stroke,
    StrokeGroup,
    prepare_request,
)


def make_stroke(points, start_t=0, pointer_type=PointerType.PEN) -> Stroke:
    stroke = Stroke(pointer_type=pointer_type)
    for i, (x, y, p) in enumerate(points):
        stroke.add_point(x, y, start_t + i * 10, p)
    return stroke


@pytest.fixture
def groups():
    return [
        StrokeGroup(
            strokes=[
                make_stroke([(1, 2, 0.5), (3, 4, 0.6)]),
                make_stroke([(10, 20, 0.1), (11, 22, 0.2)]),
            ]
        )
    ]


# =============================================================================
# prepare_request()
# =============================================================================


class TestPrepareRequest:
    """Tests for the page request defaults and wire shape."""

    def test_page_defaults(self):
        request = prepare_request()
        assert request.width == MAX_WIDTH
        assert request.height == MAX_HEIGHT
        assert request.x_dpi == 96
        assert request.y_dpi == 96
        assert request.content_type == "Text"
        assert request.conversion_state == "DIGITAL_EDIT"
        assert request.configuration.lang == LANG_EN

    def test_config_flags_applied(self):
        config = RecognitionConfig(language=LANG_DE, guides=True, chars=True, words=False)
        request = prepare_request(config)
        jiix = request.configuration.export.jiix
        assert request.configuration.lang == LANG_DE
        assert request.configuration.text.guides is True
        assert jiix.chars is True
        assert jiix.words is False

    def test_wire_keys(self, groups):
        data = prepare_request(stroke_groups=groups).to_dict()
        assert data["xDPI"] == 96
        assert data["contentType"] == "Text"
        assert data["conversionState"] == "DIGITAL_EDIT"
        assert data["configuration"]["export"]["jiix"]["bounding-box"] is True
        assert data["configuration"]["export"]["image-resolution"] == 300
        assert "raw-content" in data["configuration"]

        stroke = data["strokeGroups"][0]["strokes"][0]
        assert stroke["pointerType"] == "PEN"
        assert stroke["pointerId"] == 1
        assert stroke["x"] == [1, 3]
        assert stroke["t"] == [0, 10]
        assert "id" not in stroke

    def test_stroke_groups_copied(self, groups):
        request = prepare_request(stroke_groups=groups)
        groups.append(StrokeGroup())
        assert len(request.stroke_groups) == 1


# =============================================================================
# fingerprint()
# =============================================================================


class TestFingerprint:
    """Tests for the cache key of a request."""

    def test_hex_sha1(self, groups):
        key = fingerprint(prepare_request(stroke_groups=groups))
        assert len(key) == 40
        int(key, 16)

    def test_idempotent(self, groups):
        request = prepare_request(stroke_groups=groups)
        assert fingerprint(request) == fingerprint(request)

    def test_equal_requests_equal_keys(self, groups):
        first = prepare_request(stroke_groups=groups)
        second = copy.deepcopy(first)
        assert fingerprint(first) == fingerprint(second)

    def test_timestamps_ignored(self, groups):
        request = prepare_request(stroke_groups=groups)
        shifted = copy.deepcopy(request)
        for stroke in shifted.stroke_groups[0].strokes:
            stroke.t = [t + 1000 for t in stroke.t]
        assert fingerprint(request) == fingerprint(shifted)

    def test_point_change_changes_key(self, groups):
        request = prepare_request(stroke_groups=groups)
        changed = copy.deepcopy(request)
        changed.stroke_groups[0].strokes[0].x[0] += 1
        assert fingerprint(request) != fingerprint(changed)

    def test_pressure_change_changes_key(self, groups):
        request = prepare_request(stroke_groups=groups)
        changed = copy.deepcopy(request)
        changed.stroke_groups[0].strokes[1].p[1] = 0.9
        assert fingerprint(request) != fingerprint(changed)

    def test_pointer_type_changes_key(self, groups):
        request = prepare_request(stroke_groups=groups)
        changed = copy.deepcopy(request)
        changed.stroke_groups[0].strokes[0].pointer_type = PointerType.ERASER
        assert fingerprint(request) != fingerprint(changed)

    def test_language_changes_key(self, groups):
        en = prepare_request(RecognitionConfig(language=LANG_EN), groups)
        de = prepare_request(RecognitionConfig(language=LANG_DE), groups)
        assert fingerprint(en) != fingerprint(de)

    @pytest.mark.parametrize(
        "field,value",
        [("width", 100), ("height", 100), ("x_dpi", 300), ("content_type", "Math")],
    )
    def test_request_field_changes_key(self, groups, field, value):
        request = prepare_request(stroke_groups=groups)
        changed = copy.deepcopy(request)
        setattr(changed, field, value)
        assert fingerprint(request) != fingerprint(changed)

    def test_config_flag_changes_key(self, groups):
        base = prepare_request(RecognitionConfig(), groups)
        with_chars = prepare_request(RecognitionConfig(chars=True), groups)
        assert fingerprint(base) != fingerprint(with_chars)

    def test_huge_coordinates_do_not_break_fingerprint(self):
        drawing = Drawing(
            layers=[
                Layer(
                    strokes=[
                        InkStroke(
                            brush_type=BrushType.BALLPOINT,
                            dots=[Dot(1e20, 5.0, speed=1.0), Dot(4.0, 5.0, speed=1.0)],
                        )
                    ]
                )
            ]
        )
        request = prepare_request(stroke_groups=convert_drawing(drawing))
        assert len(fingerprint(request)) == 40
        assert request.stroke_groups[0].strokes[0].x == [4]

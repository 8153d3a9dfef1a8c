import pytest

from src.app.services.routing.polyline import decode_polyline, encode_polyline


def test_encode_reference_example():
    # Reference string from the published polyline algorithm description.
    coordinates = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]
    assert encode_polyline(coordinates) == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_decode_reference_example():
    decoded = decode_polyline("_p~iF~ps|U_ulLnnqC_mqNvxq`@")
    assert decoded == [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]


def test_decode_is_close_to_input():
    coordinates = [(48.856614, 2.3522219), (48.8583701, 2.2944813), (-33.868820, 151.209296)]
    decoded = decode_polyline(encode_polyline(coordinates))

    assert len(decoded) == len(coordinates)
    for (lat, lon), (out_lat, out_lon) in zip(coordinates, decoded):
        assert abs(lat - out_lat) <= 2e-5
        assert abs(lon - out_lon) <= 2e-5


def test_empty_inputs():
    assert encode_polyline([]) == ""
    assert decode_polyline("") == []


def test_truncated_polyline_raises():
    with pytest.raises(ValueError):
        decode_polyline("_p~iF~ps|U_")


def test_exact_halves_round_up():
    # Python's round() would give 2 for 2.5; the polyline algorithm expects 3.
    assert encode_polyline([(2.5, -2.5)], precision=0) == "EB"
    assert decode_polyline("EB", precision=0) == [(3.0, -2.0)]


@pytest.mark.parametrize("encoded", ["  ", "_p~iF\x7f"])
def test_invalid_characters_raise(encoded: str):
    with pytest.raises(ValueError, match="Invalid polyline character"):
        decode_polyline(encoded)

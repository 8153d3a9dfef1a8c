import pytest

from src.app.services.geospatial import distance_matrix_km, haversine_km, path_length_km


def test_haversine_known_distance():
    # Paris -> London, roughly 344 km great-circle.
    assert haversine_km(48.8566, 2.3522, 51.5074, -0.1278) == pytest.approx(343.5, abs=1.0)


def test_haversine_is_symmetric():
    pairs = [
        ((48.8566, 2.3522), (48.8584, 2.2945)),
        ((-33.86, 151.21), (40.71, -74.0)),
        ((0.0, 179.9), (0.0, -179.9)),
    ]
    for (lat1, lon1), (lat2, lon2) in pairs:
        assert abs(haversine_km(lat1, lon1, lat2, lon2) - haversine_km(lat2, lon2, lat1, lon1)) <= 1e-9


def test_haversine_antipodal_points():
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(6371.0 * 3.141592653589793)


def test_path_length_is_open():
    coordinates = [(0.0, 0.0), (0.0, 1.0), (0.0, 2.0)]
    one_leg = haversine_km(0.0, 0.0, 0.0, 1.0)
    assert path_length_km(coordinates) == pytest.approx(2 * one_leg)
    assert path_length_km(coordinates[:1]) == 0.0


def test_distance_matrix_is_symmetric_with_zero_diagonal():
    coordinates = [(48.85, 2.35), (48.86, 2.29), (48.85, 2.34)]
    matrix = distance_matrix_km(coordinates)

    for i in range(3):
        assert matrix[i][i] == 0.0
        for j in range(3):
            assert matrix[i][j] == matrix[j][i]

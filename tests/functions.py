from pytest import approx

from geocalc import LatLng


def assert_latlngs_equal(l1: LatLng, l2: LatLng, abs_tol=1e-7):
    """
    Asserts that two LatLngs are equal within a specified absolute tolerance.

    Args:
        l1: The first LatLng
        l2: The second LatLng
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    try:
        assert l1.lat == approx(l2.lat, abs=abs_tol)
        assert l1.lng == approx(l2.lng, abs=abs_tol)
    except AssertionError as e:
        print(l1.lat, l1.lng)
        print(l2.lat, l2.lng)
        raise e

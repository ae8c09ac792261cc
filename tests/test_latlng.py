import pytest

from geocalc import LatLng


def test_latlng_init():
    ll = LatLng(1., 2.)
    assert ll.lat == 1.
    assert ll.lng == 2.

    ll = LatLng('1.5', '-2.5')
    assert ll.lat == 1.5
    assert ll.lng == -2.5

    # Values are not bounded on construction
    ll = LatLng(100., 400.)
    assert ll.lat == 100.
    assert ll.lng == 400.

    with pytest.raises(ValueError):
        LatLng('north', 0.)


def test_latlng_immutable():
    ll = LatLng(1., 2.)
    with pytest.raises(AttributeError):
        ll.lat = 5.

    with pytest.raises(AttributeError):
        ll.foo = 5.


def test_latlng_eq():
    assert LatLng(0., 0.) == LatLng(0., 0.)
    assert LatLng(0., 0.) != LatLng(1., 0.)
    assert LatLng(0., 0.) != LatLng(0., 1.)
    assert LatLng(0., 0.) != (0., 0.)


def test_latlng_hash():
    points = [
        LatLng(0., 0.),
        LatLng(0., 0.),
        LatLng(1., 1.)
    ]
    assert len(set(points)) == 2
    assert LatLng(1., 1.) in set(points)


def test_latlng_iter():
    lat, lng = LatLng(1., 2.)
    assert (lat, lng) == (1., 2.)
    assert tuple(LatLng(3., 4.)) == (3., 4.)


def test_latlng_repr():
    assert repr(LatLng(1., 2.)) == '<LatLng(1.0, 2.0)>'


def test_latlng_normalized():
    assert LatLng(91., 190.).normalized() == LatLng(90., -170.)
    assert LatLng(-91., -190.).normalized() == LatLng(-90., 170.)
    assert LatLng(45., 180.).normalized() == LatLng(45., 180.)
    assert LatLng(45., -180.).normalized() == LatLng(45., -180.)

    # Original is left untouched
    ll = LatLng(100., 400.)
    ll.normalized()
    assert ll == LatLng(100., 400.)


def test_latlng_from_string():
    assert LatLng.from_string('52.5, 13.4') == LatLng(52.5, 13.4)
    assert LatLng.from_string('52.5,13.4') == LatLng(52.5, 13.4)
    assert LatLng.from_string(' -52.5   13.4 ') == LatLng(-52.5, 13.4)

    for invalid in ('', '52.5', '1, 2, 3', '1, east'):
        with pytest.raises(ValueError):
            LatLng.from_string(invalid)


def test_latlng_from_dms():
    assert LatLng.from_dms((33, 30, 0, 'S'), (151, 15, 0, 'E')) == LatLng(-33.5, 151.25)
    assert LatLng.from_dms((1, 0, 0, 'n'), (2, 0, 0, 'w')) == LatLng(1., -2.)


def test_latlng_to_dms():
    assert LatLng(-33.5, 151.25).to_dms() == ((33, 30, 0.0, 'S'), (151, 15, 0.0, 'E'))
    assert LatLng(1., -2.).to_dms() == ((1, 0, 0.0, 'N'), (2, 0, 0.0, 'W'))

    # Seconds that round up to 60 carry into minutes and degrees
    assert LatLng(0.9999999999999, -0.9999999999999).to_dms() == ((1, 0, 0.0, 'N'), (1, 0, 0.0, 'W'))
    assert LatLng(10.5 - 1e-12, 0.).to_dms()[0] == (10, 30, 0.0, 'N')

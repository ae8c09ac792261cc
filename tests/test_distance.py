import pytest
from pytest import approx

from geocalc import Distance


def test_distance_init():
    d = Distance(1.5)
    assert d.meters == 1.5

    d = Distance('12.5')
    assert d.meters == 12.5
    assert isinstance(d.meters, float)

    with pytest.raises(ValueError):
        Distance('twelve')


def test_distance_immutable():
    d = Distance(1.)
    with pytest.raises(AttributeError):
        d.meters = 2.

    with pytest.raises(AttributeError):
        d._meters = 2.

    assert d.meters == 1.


def test_distance_conversions():
    assert Distance(1000.).kilometers == 1.
    assert Distance(1609.344).miles == approx(1.)
    assert Distance(0.3048).feet == approx(1.)
    assert Distance(0.9144).yards == approx(1.)
    assert Distance(1852.).nautical_miles == 1.

    d = Distance(10_000.)
    assert d.meters == 10_000.
    assert d.kilometers == 10.
    assert d.feet == approx(32_808.3989501)
    assert d.miles == approx(6.2137119)


def test_distance_to():
    d = Distance(5556.)
    assert d.to('m') == 5556.
    assert d.to('km') == approx(5.556)
    assert d.to('nm') == approx(3.)
    assert d.to('Nautical Miles') == approx(3.)

    with pytest.raises(ValueError):
        d.to('parsecs')


def test_distance_from_unit():
    assert Distance.from_unit(2, 'km') == Distance(2000.)
    assert Distance.from_unit(1., 'MI').meters == approx(1609.344)
    assert Distance.from_unit(3, 'feet').meters == approx(0.9144)
    assert Distance.from_unit(1, 'yard').meters == approx(0.9144)
    assert Distance.from_unit(1, 'metres') == Distance(1.)

    with pytest.raises(ValueError):
        Distance.from_unit(1, 'furlong')


def test_distance_from_string():
    assert Distance.from_string('10km') == Distance(10_000.)
    assert Distance.from_string('2.5 mi').meters == approx(4023.36)
    assert Distance.from_string('100') == Distance(100.)
    assert Distance.from_string('  3 Nautical Miles ').meters == approx(5556.)
    assert Distance.from_string('1e3 m') == Distance(1000.)
    assert Distance.from_string('.5km') == Distance(500.)
    assert Distance.from_string('-20ft').meters == approx(-6.096)

    for invalid in ('ten km', '', 'km', '10 km 5'):
        with pytest.raises(ValueError):
            Distance.from_string(invalid)

    with pytest.raises(ValueError):
        Distance.from_string('5 parsecs')


def test_distance_eq():
    assert Distance(1.) == Distance(1.)
    assert Distance(1.) != Distance(2.)
    assert Distance(1.) != 1.
    assert Distance.from_unit(1, 'km') == Distance(1000.)


def test_distance_ordering():
    assert Distance(1.) < Distance(2.)
    assert Distance(2.) > Distance(1.)
    assert Distance(1.) <= Distance(1.)
    assert Distance(2.) >= Distance(1.)
    assert sorted([Distance(3.), Distance(1.), Distance(2.)]) == [
        Distance(1.), Distance(2.), Distance(3.)
    ]
    assert max(Distance(3.), Distance(5.)) == Distance(5.)

    with pytest.raises(TypeError):
        _ = Distance(1.) < 2.


def test_distance_hash():
    distances = [Distance(1.), Distance(1.), Distance(2.)]
    assert len(set(distances)) == 2
    assert Distance(2.) in set(distances)


def test_distance_float():
    assert float(Distance(12.5)) == 12.5


def test_distance_repr():
    assert repr(Distance(5.)) == '<Distance(5.0 m)>'

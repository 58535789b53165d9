import pytest

from transport_catalogue.catalogue import Catalogue
from transport_catalogue.domain import Stop
from transport_catalogue.geo import Coordinates
from transport_catalogue.transport_router import (
    Ride,
    RouterResponse,
    RoutingSettings,
    TransportRouter,
    Wait,
)

WAIT = 6
VELOCITY = 40.0


@pytest.fixture
def network():
    catalogue = Catalogue()
    a = Stop("A", Coordinates(55.60, 37.20))
    b = Stop("B", Coordinates(55.61, 37.21))
    c = Stop("C", Coordinates(55.62, 37.22))
    lonely = Stop("Lonely", Coordinates(55.70, 37.30))
    for stop in (a, b, c, lonely):
        catalogue.add_stop(stop)
    catalogue.set_distance(a, b, 1000)
    catalogue.set_distance(b, c, 2000)
    catalogue.add_route("100", [a, b, c, b, a], False)
    router = TransportRouter(RoutingSettings(bus_wait_time=WAIT, bus_velocity=VELOCITY))
    router.build(catalogue)
    return router, a, b, c, lonely


def test_same_stop_is_empty_journey(network):
    router, a, *_ = network
    response = router.optimal_route(a, a)
    assert response == RouterResponse(total_time=0.0, items=[])


def test_single_span_journey(network):
    router, a, b, *_ = network
    response = router.optimal_route(a, b)
    assert len(response.items) == 2
    wait, ride = response.items
    assert wait == Wait("A", float(WAIT))
    assert isinstance(ride, Ride)
    assert ride.bus == "100"
    assert ride.span_count == 1
    assert ride.time == pytest.approx(1.5)


def test_direct_ride_over_several_spans(network):
    router, a, _, c, _ = network
    response = router.optimal_route(a, c)
    assert [type(item) for item in response.items] == [Wait, Ride]
    assert response.items[1].span_count == 2


def test_total_time_is_sum_of_items(network):
    router, a, _, c, _ = network
    response = router.optimal_route(c, a)
    assert response.total_time == pytest.approx(sum(item.time for item in response.items))
    assert response.items[0].stop_name == "C"


def test_reverse_distance_is_used(network):
    router, a, b, *_ = network
    forward = router.optimal_route(a, b)
    backward = router.optimal_route(b, a)
    assert backward.total_time == pytest.approx(forward.total_time)


def test_unreachable_stop(network):
    router, a, _, _, lonely = network
    assert router.optimal_route(a, lonely) is None
    assert router.optimal_route(lonely, a) is None


def test_unknown_stop_raises(network):
    router, a, *_ = network
    stranger = Stop("Nowhere", Coordinates(0.0, 0.0))
    with pytest.raises(KeyError):
        router.optimal_route(a, stranger)


def test_query_before_build_raises():
    router = TransportRouter(RoutingSettings(bus_wait_time=1, bus_velocity=1.0))
    stop = Stop("A", Coordinates(0.0, 0.0))
    with pytest.raises(RuntimeError):
        router.optimal_route(stop, stop)


def test_transfer_between_buses():
    catalogue = Catalogue()
    a = Stop("A", Coordinates(0.0, 0.0))
    b = Stop("B", Coordinates(0.0, 0.01))
    c = Stop("C", Coordinates(0.0, 0.02))
    for stop in (a, b, c):
        catalogue.add_stop(stop)
    catalogue.set_distance(a, b, 500)
    catalogue.set_distance(b, c, 500)
    catalogue.add_route("1", [a, b, a], False)
    catalogue.add_route("2", [b, c, b], False)
    router = TransportRouter(RoutingSettings(bus_wait_time=2, bus_velocity=30.0))
    router.build(catalogue)
    response = router.optimal_route(a, c)
    assert [type(item) for item in response.items] == [Wait, Ride, Wait, Ride]
    assert [item.bus for item in response.items if isinstance(item, Ride)] == ["1", "2"]
    assert response.items[2].stop_name == "B"


def test_default_settings():
    router = TransportRouter()
    assert router.settings == RoutingSettings(bus_wait_time=0, bus_velocity=0.0)


def test_negative_velocity_is_rejected():
    catalogue = Catalogue()
    a = Stop("A", Coordinates(0.0, 0.0))
    b = Stop("B", Coordinates(0.0, 0.01))
    catalogue.add_stop(a)
    catalogue.add_stop(b)
    catalogue.set_distance(a, b, 100)
    catalogue.add_route("1", [a, b], True)
    router = TransportRouter(RoutingSettings(bus_wait_time=1, bus_velocity=-5.0))
    with pytest.raises(ValueError):
        router.build(catalogue)
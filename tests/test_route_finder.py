from unittest.mock import MagicMock

import pytest

from mapnav.adapters.cache import InMemoryCache, NullCache
from mapnav.adapters.graph import CSVNetworkRepository
from mapnav.config import AppConfig, CacheConfig, GraphConfig
from mapnav.container import Container
from mapnav.domain.errors import NoPathFoundError, UnknownVertexError
from mapnav.domain.models import Route
from mapnav.ports.cache import CachePort
from mapnav.ports.graph import NetworkRepositoryPort
from mapnav.services import RouteFinderService
from mapnav.services.route_finder import SAME_LOCATION_MESSAGE


@pytest.fixture
def repository(diamond_network):
    repo = MagicMock(spec=CSVNetworkRepository)
    repo.load.return_value = diamond_network
    repo.list_locations.side_effect = diamond_network.all_vertices
    return repo


@pytest.fixture
def finder(repository):
    return RouteFinderService(network_repository=repository)


class TestRouteFinderService:
    def test_list_locations(self, finder):
        assert finder.list_locations() == ["A", "B", "D", "C", "E"]

    def test_find_route(self, finder):
        route = finder.find_route("A", "D")

        assert route.path == ("A", "B", "D")
        assert route.total_distance_km == 3

    def test_find_route_same_location(self, finder):
        assert finder.find_route("B", "B") == Route(path=("B",), total_distance_km=0)

    def test_find_route_unknown_location(self, finder):
        with pytest.raises(UnknownVertexError):
            finder.find_route("A", "Nonexistent Place")

    def test_find_route_no_path(self, finder):
        with pytest.raises(NoPathFoundError) as exc_info:
            finder.find_route("A", "E")

        assert exc_info.value.source == "A"
        assert exc_info.value.destination == "E"

    def test_find_route_uses_cache(self, repository):
        cache = InMemoryCache[Route](name="test")
        finder = RouteFinderService(network_repository=repository, cache=cache)

        first = finder.find_route("A", "D")
        second = finder.find_route("A", "D")

        assert first is second
        assert cache.stats()["hits"] == 1
        assert cache.size() == 1

    def test_no_path_is_not_cached(self, repository):
        cache = InMemoryCache[Route](name="test")
        finder = RouteFinderService(network_repository=repository, cache=cache)

        with pytest.raises(NoPathFoundError):
            finder.find_route("A", "E")

        assert cache.size() == 0


class TestFindRouteSafe:
    def test_success(self, finder):
        route, error = finder.find_route_safe("D", "A")

        assert error is None
        assert route.path == ("D", "B", "A")

    def test_same_location(self, finder):
        assert finder.find_route_safe("A", "A") == (None, SAME_LOCATION_MESSAGE)

    def test_unknown_location(self, finder):
        route, error = finder.find_route_safe("Nonexistent Place", "A")

        assert route is None
        assert error == "Invalid location: Nonexistent Place"

    def test_no_path(self, finder):
        route, error = finder.find_route_safe("A", "E")

        assert route is None
        assert error == "No path available between A and E."


def test_format_route(finder):
    route = Route(
        path=("KIIMS", "Patia Square", "Kalinga Hospital Square"),
        total_distance_km=6,
    )

    assert finder.format_route(route) == (
        "Shortest Path:\n"
        "KIIMS -> Patia Square -> Kalinga Hospital Square\n"
        "Distance: 6 km"
    )


class TestContainer:
    def test_default_wiring_answers_reference_queries(self):
        container = Container.create_default(AppConfig())
        finder = container.resolve(RouteFinderService)

        assert "Trident Academy Of Technology" in finder.list_locations()
        assert finder.find_route("KIIMS", "KIIT").total_distance_km == 1
        assert container.resolve(RouteFinderService) is finder

    def test_network_is_shared(self):
        container = Container.create_default(AppConfig())

        finder = container.resolve(RouteFinderService)
        repository = container.resolve(NetworkRepositoryPort)

        assert finder.network_repository is repository
        assert isinstance(repository, CSVNetworkRepository)

    def test_cache_follows_config(self):
        enabled = Container.create_default(AppConfig(cache=CacheConfig(max_size=8)))
        disabled = Container.create_default(AppConfig(cache=CacheConfig(enabled=False)))

        cache = enabled.resolve(CachePort)
        assert isinstance(cache, InMemoryCache)
        assert cache.max_size == 8
        assert isinstance(disabled.resolve(CachePort), NullCache)

    def test_register_override_and_non_singleton(self, repository):
        container = Container(config=AppConfig())
        container.register(NetworkRepositoryPort, lambda: repository)
        container.register(
            RouteFinderService,
            lambda: RouteFinderService(
                network_repository=container.resolve(NetworkRepositoryPort)
            ),
            singleton=False,
        )

        first = container.resolve(RouteFinderService)
        second = container.resolve(RouteFinderService)

        assert first is not second
        assert first.find_route("A", "D").total_distance_km == 3

    def test_resolve_unregistered_raises(self):
        container = Container(config=AppConfig())

        with pytest.raises(KeyError):
            container.resolve(CachePort)

    def test_clear_all(self):
        container = Container.create_default(AppConfig())
        container.clear_all()

        assert not container.is_registered(RouteFinderService)


def _write_map(directory, roads):
    names = sorted({name for road in roads for name in road[:2]})
    (directory / "locations.csv").write_text(
        "name\n" + "".join(f"{name}\n" for name in names), encoding="utf-8"
    )
    (directory / "roads.csv").write_text(
        "source,destination,distance_km\n"
        + "".join(f"{a},{b},{km}\n" for a, b, km in roads),
        encoding="utf-8",
    )


def test_reloaded_map_invalidates_cached_routes(tmp_path):
    _write_map(tmp_path, [("A", "B", 3), ("B", "C", 2)])
    repository = CSVNetworkRepository(GraphConfig(data_dir=tmp_path))
    cache = InMemoryCache[Route](name="test")
    finder = RouteFinderService(network_repository=repository, cache=cache)

    assert finder.find_route("A", "C").total_distance_km == 5

    _write_map(tmp_path, [("A", "C", 1)])
    repository.clear_cache()

    route = finder.find_route("A", "C")
    assert route == Route(path=("A", "C"), total_distance_km=1)
    assert cache.size() == 1
    with pytest.raises(UnknownVertexError):
        finder.find_route("A", "B")


def test_same_network_keeps_cached_routes(tmp_path):
    _write_map(tmp_path, [("A", "B", 3)])
    repository = CSVNetworkRepository(GraphConfig(data_dir=tmp_path))
    cache = InMemoryCache[Route](name="test")
    finder = RouteFinderService(network_repository=repository, cache=cache)

    finder.find_route("A", "B")
    finder.find_route("B", "A")
    finder.find_route("A", "B")

    assert cache.size() == 2
    assert cache.stats()["hits"] == 1

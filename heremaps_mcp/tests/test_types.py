import json

from heremaps_mcp.core.types import Coordinate, ToolFailure, ToolSuccess


def test_coordinate_from_three_dimensional_point():
    coordinate = Coordinate.from_point((52.5308, 13.3847, 34.5))

    assert coordinate.elevation == 34.5
    assert coordinate.to_pair(5) == [52.5308, 13.3847]


def test_to_pair_prints_whole_degrees_as_integers():
    pair = Coordinate(52.000001, -13.0).to_pair(5)

    assert pair == [52, -13]
    assert all(isinstance(value, int) for value in pair)
    assert json.dumps(pair) == "[52, -13]"


def test_outcomes_render():
    assert ToolSuccess({"name": "Café"}).render() == '{"name":"Café"}'
    assert ToolSuccess([1], indent=2).render() == "[\n  1\n]"
    assert ToolFailure("Routing failed: No routes found").render() == "Routing failed: No routes found"

"""Tests for independent vertex cover validation."""

from vertexga import problem


class TestValidateSolution:
    def test_valid_cover(self, triangle):
        result = problem.validate_solution(triangle, [0, 1])
        assert result["feasible"] is True
        assert result["cover_size"] == 2

    def test_invalid_cover(self, triangle):
        result = problem.validate_solution(triangle, [0])
        assert result["feasible"] is False
        assert result["uncovered_edges"] == 1


class TestBaseline:
    def test_baseline_is_a_cover(self, grid_5x3):
        cover = problem.baseline_cover(grid_5x3)
        assert problem.validate_solution(grid_5x3, cover)["feasible"]
        # 2-approximation of the optimum 7
        assert 7 <= len(cover) <= 14

    def test_edgeless(self, edgeless):
        assert problem.baseline_cover(edgeless) == set()

import unittest

from crossexpo.core.constants import Direction
from crossexpo.core.models import Candidate
from crossexpo.engine.candidates import find_candidates, rank_candidates, score_candidate
from crossexpo.engine.grid import CrosswordGrid


class FindCandidatesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = CrosswordGrid()
        self.grid.place_word("CAT", 0, 0, Direction.ACROSS)

    def test_finds_crossing_through_shared_letter(self) -> None:
        candidates = find_candidates(self.grid, "ACE")
        origins = {(c.row, c.col, c.direction) for c in candidates}
        self.assertIn((0, 1, Direction.DOWN), origins)
        self.assertIn((-1, 0, Direction.DOWN), origins)

    def test_every_candidate_is_a_legal_crossing(self) -> None:
        for candidate in find_candidates(self.grid, "TACT"):
            intersections = self.grid.check_placement(
                "TACT", candidate.row, candidate.col, candidate.direction
            )
            self.assertTrue(intersections)
            self.assertEqual(intersections, candidate.intersections)

    def test_candidates_are_unique(self) -> None:
        candidates = find_candidates(self.grid, "TACT")
        keys = [(c.row, c.col, c.direction) for c in candidates]
        self.assertEqual(len(keys), len(set(keys)))

    def test_no_shared_letters_means_no_candidates(self) -> None:
        self.assertEqual(find_candidates(self.grid, "DOG"), [])

    def test_same_direction_overlap_is_rejected(self) -> None:
        for word in ("AT", "CATS", "SCAT"):
            candidates = find_candidates(self.grid, word)
            self.assertTrue(candidates)
            self.assertTrue(all(c.direction == Direction.DOWN for c in candidates))


class ScoreCandidateTests(unittest.TestCase):
    def test_intersections_dominate_distance(self) -> None:
        near = Candidate(row=0, col=0, direction=Direction.DOWN, intersections=[0])
        far = Candidate(row=9, col=-9, direction=Direction.DOWN, intersections=[0, 2])
        self.assertAlmostEqual(score_candidate(near), 100.0)
        self.assertAlmostEqual(score_candidate(far), 198.2)
        self.assertEqual(rank_candidates([near, far]), [far, near])

    def test_closer_to_origin_ranks_first(self) -> None:
        a = Candidate(row=-3, col=1, direction=Direction.ACROSS, intersections=[1])
        b = Candidate(row=1, col=0, direction=Direction.DOWN, intersections=[0])
        self.assertEqual(rank_candidates([a, b])[0], b)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

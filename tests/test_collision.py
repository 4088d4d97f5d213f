import unittest

from lunar_collision import (
    Collision,
    box_edges,
    check_collision,
    find_collision,
    lines_intersect,
    segment_hits_box,
)
from lunar_terrain import LunarTerrain
from lunarlander import LunarLander


class TestLinesIntersect(unittest.TestCase):
    def test_crossing_segments(self):
        self.assertTrue(lines_intersect(0, 0, 10, 10, 0, 10, 10, 0))

    def test_parallel_segments(self):
        self.assertFalse(lines_intersect(0, 0, 10, 0, 0, 5, 10, 5))

    def test_collinear_overlap_counts_as_no_hit(self):
        self.assertFalse(lines_intersect(0, 0, 10, 0, 5, 0, 15, 0))

    def test_t_junction_at_start_of_second_segment(self):
        # Second segment starts on the first one, so uB == 0
        self.assertTrue(lines_intersect(0, 0, 10, 0, 5, 0, 5, 10))

    def test_t_junction_at_end_of_second_segment(self):
        # Second segment ends on the first one, so uB == 1
        self.assertTrue(lines_intersect(0, 0, 10, 0, 5, 10, 5, 0))

    def test_shared_endpoint(self):
        self.assertTrue(lines_intersect(0, 0, 10, 10, 10, 10, 20, 0))

    def test_lines_cross_outside_segments(self):
        self.assertFalse(lines_intersect(0, 0, 1, 1, 3, 0, 2, 1))

    def test_degenerate_point_segment(self):
        self.assertFalse(lines_intersect(5, 5, 5, 5, 0, 0, 10, 10))


class TestFindCollision(unittest.TestCase):
    def test_box_edges_order(self):
        edges = box_edges(0, 0, 10, 5)
        self.assertEqual(edges[0], ((0, 0), (10, 0)))
        self.assertEqual(edges[1], ((10, 0), (10, 5)))
        self.assertEqual(edges[2], ((10, 5), (0, 5)))
        self.assertEqual(edges[3], ((0, 5), (0, 0)))

    def test_segment_hits_box(self):
        box = (0, 0, 10, 10)
        self.assertTrue(segment_hits_box((-5, 5), (5, 5), box))
        self.assertFalse(segment_hits_box((-5, 20), (20, 20), box))

    def test_first_hit_in_terrain_order(self):
        box = (0, 0, 10, 10)
        points = [(-20, 50), (-10, 50), (5, 5), (20, 5)]
        hit = find_collision(box, points)
        self.assertEqual(hit, Collision(1, (-10, 50), (5, 5)))

    def test_no_collision(self):
        box = (0, 0, 10, 10)
        self.assertIsNone(find_collision(box, [(-20, 50), (40, 50)]))
        self.assertIsNone(find_collision(box, [(0, 50)]))
        self.assertIsNone(find_collision(box, []))

    def test_flat_ground_touching_bottom_edge(self):
        # Horizontal edges are parallel to the ground; the side edges register the touch
        box = (0, 0, 10, 10)
        hit = find_collision(box, [(-50, 10), (50, 10)])
        self.assertEqual(hit, Collision(0, (-50, 10), (50, 10)))

    def test_repeated_calls_agree(self):
        box = (0, 0, 10, 10)
        points = [(-20, 50), (-10, 50), (5, 5), (20, 5)]
        self.assertEqual(find_collision(box, points), find_collision(box, points))

    def test_check_collision_with_lander_and_terrain(self):
        lander = LunarLander((400, 200), size=(32, 32))
        ground = LunarTerrain.from_points([(0, 216), (800, 216)], 800, 580, 120, seed=0)
        hit = check_collision(lander, ground)
        self.assertIsNotNone(hit)
        self.assertEqual(hit.index, 0)
        self.assertEqual(check_collision(lander, ground), hit)

        high = LunarLander((400, 100), size=(32, 32))
        self.assertIsNone(check_collision(high, ground))


if __name__ == "__main__":
    unittest.main()

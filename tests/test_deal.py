import unittest
from collections import Counter

from game import (
    DEFAULT_SYMBOLS,
    Tile,
    deal_tiles,
    render_tiles,
    tiles_from_layout,
    validate_symbols,
)


class TestDeal(unittest.TestCase):
    def test_given_symbol_sets_when_dealing_then_two_tiles_per_symbol(self):
        for symbols in (['A'], ['A', 'B'], list('ABCDEFGH'), list(DEFAULT_SYMBOLS)):
            tiles = deal_tiles(symbols, seed=11)
            self.assertEqual(len(tiles), 2 * len(symbols))
            counts = Counter(t.symbol for t in tiles)
            self.assertEqual(set(counts), set(symbols))
            self.assertTrue(all(n == 2 for n in counts.values()))

    def test_given_dealt_tiles_when_inspecting_then_ids_dense_and_all_face_down(self):
        tiles = deal_tiles(['A', 'B', 'C'], seed=1)
        self.assertEqual([t.id for t in tiles], list(range(6)))
        self.assertTrue(all(not t.face_up and not t.matched for t in tiles))

    def test_given_same_seed_when_dealing_twice_then_same_layout(self):
        a = [t.symbol for t in deal_tiles(list('ABCDEFGH'), seed=42)]
        b = [t.symbol for t in deal_tiles(list('ABCDEFGH'), seed=42)]
        self.assertEqual(a, b)

    def test_given_many_seeds_when_dealing_two_pairs_then_every_arrangement_occurs(self):
        # 4!/(2!2!) = 6 distinct arrangements of AABB
        seen = set()
        for seed in range(600):
            seen.add(tuple(t.symbol for t in deal_tiles(['A', 'B'], seed=seed)))
        self.assertEqual(len(seen), 6)

    def test_given_empty_or_duplicate_symbols_when_dealing_then_value_error(self):
        with self.assertRaises(ValueError):
            deal_tiles([])
        with self.assertRaises(ValueError):
            deal_tiles(['A', 'B', 'A'])
        with self.assertRaises(ValueError):
            validate_symbols(())

    def test_given_layout_when_building_tiles_then_order_kept_and_pairs_checked(self):
        tiles = tiles_from_layout(['A', 'B', 'A', 'B'])
        self.assertEqual([t.symbol for t in tiles], ['A', 'B', 'A', 'B'])
        with self.assertRaises(ValueError):
            tiles_from_layout(['A', 'B', 'A'])
        with self.assertRaises(ValueError):
            tiles_from_layout(['A', 'A', 'A', 'A'])
        with self.assertRaises(ValueError):
            tiles_from_layout([])

    def test_given_default_symbols_when_counting_then_eight_pairs(self):
        self.assertEqual(len(DEFAULT_SYMBOLS), 8)
        self.assertEqual(len(set(DEFAULT_SYMBOLS)), 8)


class TestTile(unittest.TestCase):
    def test_given_tile_when_matched_then_face_up(self):
        t = Tile(id=0, symbol='A').as_matched()
        self.assertTrue(t.face_up)
        self.assertTrue(t.matched)

    def test_given_tiles_when_rendering_then_face_down_show_ids_and_face_up_show_symbols(self):
        tiles = tiles_from_layout(['A', 'B', 'A', 'B'])
        tiles[0] = tiles[0].flipped(True)
        txt = render_tiles(tiles, columns=2)
        lines = txt.split('\n')
        self.assertEqual(len(lines), 2)
        self.assertIn('A', lines[0])
        self.assertIn('#1', lines[0])
        self.assertIn('#3', lines[1])
        self.assertNotIn('B', txt)
        self.assertIn('[#2]', render_tiles(tiles, columns=2, highlight={2}))
        with self.assertRaises(ValueError):
            render_tiles(tiles, columns=0)


if __name__ == '__main__':
    unittest.main()

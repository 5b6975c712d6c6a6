import unittest

from wordcross.core.constants import Orientation
from wordcross.core.models import Layout, WordPlacement
from wordcross.engine.validator import LayoutValidator, is_valid

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


def layout(*entries) -> Layout:
    return Layout.of(*(WordPlacement.build(text, x, y, o) for text, x, y, o in entries))


def hiking(neun=("NEUN", 10, 4, V), sonne=("SONNE", 5, 2, V)) -> Layout:
    return layout(
        ("MAIWANDERUNG", 0, 4, H),
        neun,
        sonne,
        ("RADWEG", 1, 6, H),
        ("BAZAR", 8, 0, V),
    )


VALID_LAYOUTS = {
    "hiking": hiking(),
    "disjoint_rows": layout(("MAIWANDERUNG", 0, 0, H), ("NEUN", 0, 2, H)),
    "vertical_cross": layout(("MAIWANDERUNG", 0, 0, V), ("NEUN", 0, 5, H)),
    "corner_cross": layout(("AB", 0, 0, H), ("BC", 1, 0, V)),
    "single": layout(("WORD", 0, 0, V)),
}

INVALID_LAYOUTS = {
    "neun_stacked_on_sonne": hiking(neun=("NEUN", 5, 5, V)),
    "neun_parallel_below": hiking(neun=("NEUN", 5, 5, H)),
    "sonne_touches_radweg": hiking(sonne=("SONNE", 5, 1, V)),
    "letter_mismatch": layout(("MAIWANDERUNG", 0, 0, V), ("RADWEG", 0, 1, H)),
    "same_orientation_overlap": layout(("ABC", 0, 0, H), ("CDE", 2, 0, H)),
    "end_to_start": layout(("AB", 0, 0, H), ("CD", 2, 0, H)),
    "side_by_side": layout(("AB", 0, 0, H), ("CD", 0, 1, H)),
    "three_on_one_cell": layout(("AB", 0, 0, H), ("AC", 0, 0, V), ("AD", 0, 0, H)),
    "consecutive_crossings": layout(("ABC", 0, 1, H), ("XA", 0, 0, V), ("XB", 1, 0, V)),
}


class ValidatorScenarioTests(unittest.TestCase):
    def test_hiking_layout_is_valid(self) -> None:
        self.assertTrue(is_valid(hiking()))

    def test_neun_moved_onto_sonne_is_rejected(self) -> None:
        self.assertFalse(is_valid(hiking(neun=("NEUN", 5, 5, V))))

    def test_neun_parallel_to_maiwanderung_is_rejected(self) -> None:
        self.assertFalse(is_valid(hiking(neun=("NEUN", 5, 5, H))))

    def test_disjoint_horizontal_words_are_valid(self) -> None:
        disjoint = layout(("MAIWANDERUNG", 0, 0, H), ("NEUN", 0, 2, H))
        self.assertTrue(is_valid(disjoint))
        self.assertEqual(disjoint.crossing_count(), 0)

    def test_valid_catalogue(self) -> None:
        for name, candidate in VALID_LAYOUTS.items():
            with self.subTest(name=name):
                self.assertTrue(is_valid(candidate))

    def test_invalid_catalogue(self) -> None:
        for name, candidate in INVALID_LAYOUTS.items():
            with self.subTest(name=name):
                self.assertFalse(is_valid(candidate))


class ValidatorPropertyTests(unittest.TestCase):
    def test_result_carries_reason(self) -> None:
        result = LayoutValidator().validate(INVALID_LAYOUTS["letter_mismatch"])
        self.assertFalse(result.ok)
        self.assertEqual(len(result.messages), 1)
        self.assertIn("mismatch", result.messages[0])

    def test_idempotent(self) -> None:
        validator = LayoutValidator()
        for candidate in list(VALID_LAYOUTS.values()) + list(INVALID_LAYOUTS.values()):
            first = validator.is_valid(candidate)
            self.assertEqual([validator.is_valid(candidate) for _ in range(3)], [first] * 3)

    def test_scan_order_does_not_matter(self) -> None:
        rows_first = LayoutValidator()
        columns_first = LayoutValidator(vertical_first=True)
        for candidate in list(VALID_LAYOUTS.values()) + list(INVALID_LAYOUTS.values()):
            self.assertEqual(rows_first.is_valid(candidate), columns_first.is_valid(candidate))

    def test_translation_does_not_change_verdict(self) -> None:
        for candidate in list(VALID_LAYOUTS.values()) + list(INVALID_LAYOUTS.values()):
            self.assertEqual(is_valid(candidate), is_valid(candidate.translated(-4, 9)))

    def test_placement_order_does_not_change_verdict(self) -> None:
        for candidate in list(VALID_LAYOUTS.values()) + list(INVALID_LAYOUTS.values()):
            reordered = Layout(tuple(reversed(candidate.placements)))
            self.assertEqual(is_valid(candidate), is_valid(reordered))

    def test_valid_layouts_have_one_word_per_orientation_per_cell(self) -> None:
        for candidate in VALID_LAYOUTS.values():
            for occupants in candidate.cell_index.values():
                orientations = [candidate[o.index].orientation for o in occupants]
                self.assertLessEqual(orientations.count(H), 1)
                self.assertLessEqual(orientations.count(V), 1)
                self.assertEqual(len({o.letter for o in occupants}), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

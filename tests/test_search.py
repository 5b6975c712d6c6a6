import logging
import unittest
from unittest.mock import MagicMock

from wordcross.core.constants import Orientation
from wordcross.core.exceptions import SearchLimitReached
from wordcross.core.models import Layout, WordPlacement
from wordcross.engine.progress import LoggingProgressObserver, RecordingObserver
from wordcross.engine.search import SearchLimits, SearchRun, SolutionSet, StopReason

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


def crossing_pair(dx: int = 0, dy: int = 0) -> Layout:
    return Layout.of(
        WordPlacement.build("AB", 0, 0, H),
        WordPlacement.build("BC", 1, 0, V),
    ).translated(dx, dy)


class SolutionSetTests(unittest.TestCase):
    def test_normalized_set_collapses_translations(self) -> None:
        solutions = SolutionSet(max_solutions=10)
        self.assertIsNotNone(solutions.add(crossing_pair(3, 4)))
        self.assertIsNone(solutions.add(crossing_pair(-1, 2)))
        self.assertEqual(len(solutions), 1)
        self.assertEqual(solutions.layouts[0].bounds.min_x, 0)
        self.assertIn(crossing_pair(7, 7), solutions)

    def test_exact_set_keeps_translations(self) -> None:
        solutions = SolutionSet(max_solutions=10, normalize=False)
        solutions.add(crossing_pair(3, 4))
        solutions.add(crossing_pair(-1, 2))
        self.assertEqual(len(solutions), 2)

    def test_placement_order_is_irrelevant(self) -> None:
        solutions = SolutionSet(max_solutions=10)
        pair = crossing_pair()
        solutions.add(pair)
        self.assertIsNone(solutions.add(Layout(tuple(reversed(pair.placements)))))

    def test_add_returns_the_stored_form(self) -> None:
        normalized = SolutionSet(max_solutions=10)
        self.assertEqual(normalized.add(crossing_pair(3, 4)), crossing_pair())
        exact = SolutionSet(max_solutions=10, normalize=False)
        self.assertEqual(exact.add(crossing_pair(3, 4)), crossing_pair(3, 4))

    def test_outcome_exhausted_follows_stop_reason(self) -> None:
        run = SearchRun.start(0, 1)
        self.assertTrue(run.outcome(StopReason.EXHAUSTED).exhausted)
        for reason in (StopReason.QUOTA, StopReason.ITERATION_LIMIT, StopReason.TIME_LIMIT):
            self.assertFalse(run.outcome(reason).exhausted)

    def test_full(self) -> None:
        solutions = SolutionSet(max_solutions=1)
        self.assertFalse(solutions.full)
        solutions.add(crossing_pair())
        self.assertTrue(solutions.full)


class SearchRunTests(unittest.TestCase):
    def test_rejects_bad_arguments(self) -> None:
        with self.assertRaises(ValueError):
            SearchRun.start(min_crossings=-1, max_solutions=1)
        with self.assertRaises(ValueError):
            SearchRun.start(min_crossings=0, max_solutions=0)
        with self.assertRaises(ValueError):
            SearchLimits(max_iterations=0)

    def test_offer_applies_threshold_and_notifies(self) -> None:
        observer = MagicMock()
        run = SearchRun.start(min_crossings=1, max_solutions=5, observer=observer)
        disjoint = Layout.of(WordPlacement.build("AB", 0, 0, H))
        self.assertIsNone(run.offer(disjoint))
        stored = run.offer(crossing_pair(2, 2))
        self.assertIsNotNone(stored)
        observer.found_solution.assert_called_once_with(stored, 1, 0)

    def test_iteration_limit(self) -> None:
        observer = RecordingObserver()
        run = SearchRun.start(0, 1, observer=observer, limits=SearchLimits(max_iterations=3))
        run.tick()
        run.tick()
        with self.assertRaises(SearchLimitReached) as ctx:
            run.tick()
        self.assertEqual(ctx.exception.reason, "iteration_limit")
        self.assertEqual(run.interrupted(ctx.exception).stop_reason, StopReason.ITERATION_LIMIT)
        self.assertEqual(observer.iterations, 3)

    def test_time_limit_uses_clock(self) -> None:
        ticks = iter([0.0, 0.5, 2.5])
        run = SearchRun(
            min_crossings=0,
            max_solutions=1,
            limits=SearchLimits(time_limit_seconds=2.0),
            clock=lambda: next(ticks),
        )
        run.tick()
        with self.assertRaises(SearchLimitReached) as ctx:
            run.tick()
        self.assertEqual(ctx.exception.reason, "time_limit")


class LoggingProgressObserverTests(unittest.TestCase):
    def test_logs_every_interval(self) -> None:
        logger = logging.getLogger("wordcross.test.progress")
        observer = LoggingProgressObserver(interval=10, total=40, logger=logger)
        with self.assertLogs(logger, level="INFO") as captured:
            for iteration in range(25):
                observer.next_iteration(iteration)
        self.assertEqual(len(captured.records), 2)
        self.assertIn("10 of 40", captured.output[0])

    def test_logs_solutions(self) -> None:
        logger = logging.getLogger("wordcross.test.solutions")
        observer = LoggingProgressObserver(logger=logger)
        with self.assertLogs(logger, level="DEBUG") as captured:
            observer.found_solution(crossing_pair(), 1, 7)
        self.assertIn("1 crossings", captured.output[0])
        self.assertTrue(any("AB" in line for line in captured.output))

    def test_rejects_bad_interval(self) -> None:
        with self.assertRaises(ValueError):
            LoggingProgressObserver(interval=0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

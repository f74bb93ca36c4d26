#!/usr/bin/env python3
"""
Tests for memoized deferred values.
"""

import unittest

from lazystream import StreamConfig, Thunk
from lazystream.streams import add_force_listener, remove_force_listener


class TestThunk(unittest.TestCase):
    """Test forcing and memoization."""

    def setUp(self):
        StreamConfig.reset()

    def tearDown(self):
        StreamConfig.reset()

    def test_plain_value_is_resolved(self):
        """Test non-callables are held as values."""
        thunk = Thunk(42)
        self.assertTrue(thunk.is_forced)
        self.assertEqual(thunk.force(), 42)

    def test_callable_is_deferred(self):
        """Test callables run on first force only."""
        calls = []
        thunk = Thunk(lambda: calls.append(1) or "value")

        self.assertFalse(thunk.is_forced)
        self.assertEqual(calls, [])

        self.assertEqual(thunk.force(), "value")
        self.assertEqual(thunk.force(), "value")
        self.assertTrue(thunk.is_forced)
        self.assertEqual(calls, [1])

    def test_force_returns_same_object(self):
        """Test repeated forcing returns the cached object."""
        thunk = Thunk.deferred(lambda: object())
        self.assertIs(thunk.force(), thunk.force())

    def test_resolved_callable(self):
        """Test holding a callable as a value."""
        thunk = Thunk.resolved(len)
        self.assertTrue(thunk.is_forced)
        self.assertIs(thunk.force(), len)

    def test_deferred_requires_callable(self):
        """Test explicit deferral of a non-callable."""
        with self.assertRaises(TypeError):
            Thunk.deferred(3)

    def test_failed_computation_stays_pending(self):
        """Test an exception propagates and the next force retries."""
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("first attempt fails")
            return "ok"

        thunk = Thunk(flaky)
        with self.assertRaises(RuntimeError):
            thunk.force()
        self.assertFalse(thunk.is_forced)

        self.assertEqual(thunk.force(), "ok")
        self.assertEqual(len(attempts), 2)

    def test_repr(self):
        """Test textual display."""
        thunk = Thunk(lambda: 7)
        self.assertEqual(repr(thunk), "Thunk(<pending>)")
        thunk.force()
        self.assertEqual(repr(thunk), "Thunk(7)")

    def test_guarded_thunk(self):
        """Test thunks built in thread-safe mode behave the same."""
        StreamConfig.set_defaults(thread_safe=True)
        calls = []
        thunk = Thunk(lambda: calls.append(1) or 5)

        self.assertEqual(thunk.force(), 5)
        self.assertEqual(thunk.force(), 5)
        self.assertEqual(calls, [1])


class TestForceListeners(unittest.TestCase):
    """Test forcing notifications."""

    def setUp(self):
        self.seen = []
        add_force_listener(self.seen.append)

    def tearDown(self):
        remove_force_listener(self.seen.append)
        StreamConfig.reset()

    def test_listener_sees_each_first_force(self):
        """Test listeners run once per thunk."""
        thunk = Thunk(lambda: 1)
        thunk.force()
        thunk.force()
        Thunk(2).force()

        self.assertEqual(len(self.seen), 1)
        self.assertIs(self.seen[0], thunk)

    def test_removed_listener_is_silent(self):
        """Test unregistering."""
        remove_force_listener(self.seen.append)
        Thunk(lambda: 1).force()
        self.assertEqual(self.seen, [])

    def test_trace_forcing_logs(self):
        """Test forcing is logged at DEBUG when tracing."""
        StreamConfig.set_defaults(trace_forcing=True)
        with self.assertLogs("lazystream.streams.thunk", level="DEBUG") as logs:
            Thunk(lambda: 1).force()
        self.assertIn("Forced thunk", logs.output[0])


if __name__ == "__main__":
    unittest.main()

"""
test_dispatch
=============

Tests the WaitGroup and DispatchHandler classes contained in the dispatch submodule of skystreak.concurrency.
"""

from unittest import TestCase, IsolatedAsyncioTestCase
import asyncio

from skystreak.concurrency import WaitGroup, DispatchHandler
from skystreak.errors import InvariantViolationError


class TestWaitGroup(IsolatedAsyncioTestCase):

    async def test_wait_empty(self):

        await asyncio.wait_for(WaitGroup().wait(), timeout=1)

    async def test_wait_for_pending(self):

        group = WaitGroup()
        group.add()
        group.add()

        waiter = asyncio.ensure_future(group.wait())

        group.done()
        await asyncio.sleep(0)
        self.assertFalse(waiter.done())
        self.assertEqual(group.pending, 1)

        group.done()
        await asyncio.wait_for(waiter, timeout=1)
        self.assertEqual(group.pending, 0)


class TestWaitGroupDone(TestCase):

    def test_done_without_add(self):

        with self.assertRaises(InvariantViolationError):
            WaitGroup().done()


class TestDispatchHandler(IsolatedAsyncioTestCase):

    async def test_enter_twice(self):

        handler = DispatchHandler()

        self.assertTrue(await handler.enter("x"))

        with self.assertLogs('skystreak.concurrency.dispatch', 'ERROR') as logs:
            self.assertFalse(await handler.enter("x"))

        self.assertIn('more than one x not allowed', logs.output[0])
        self.assertEqual(await handler.count(), 1)
        self.assertEqual(handler.dispatch_group.pending, 1)

        await handler.leave("x")

        self.assertEqual(await handler.count(), 0)
        self.assertEqual(await handler.running(), frozenset())

    async def test_leave_unknown(self):

        handler = DispatchHandler()

        with self.assertRaises(InvariantViolationError):
            await handler.leave("nothing")

    async def test_wait_for_all(self):

        handler = DispatchHandler()

        await handler.enter("frame_1")
        await handler.enter("frame_2")

        self.assertEqual(await handler.running(), frozenset({"frame_1", "frame_2"}))

        async def finish():
            await asyncio.sleep(0.01)
            await handler.leave("frame_2")
            await handler.leave("frame_1")

        finisher = asyncio.ensure_future(finish())

        await asyncio.wait_for(handler.dispatch_group.wait(), timeout=1)

        self.assertEqual(await handler.count(), 0)
        await finisher


if __name__ == '__main__':
    import unittest
    unittest.main()

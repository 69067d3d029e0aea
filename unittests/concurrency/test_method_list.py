"""
test_method_list
================

Tests the MethodList class contained in the method_list submodule of skystreak.concurrency.
"""

from unittest import IsolatedAsyncioTestCase

from skystreak.concurrency import MethodList


async def one():
    return 1


async def two():
    return 2


class TestMethodList(IsolatedAsyncioTestCase):

    async def test_add_and_value(self):

        methods = MethodList()

        await methods.add(3, one)
        await methods.add(1, two)

        self.assertEqual(await methods.count(), 2)
        self.assertIs(await methods.value(3), one)
        self.assertIsNone(await methods.value(2))
        self.assertEqual(await (await methods.value(1))(), 2)

    async def test_replace(self):

        methods = MethodList({0: one})

        await methods.add(0, two)

        self.assertIs(await methods.value(0), two)
        self.assertEqual(await methods.count(), 1)

    async def test_next_key(self):

        methods = MethodList({5: one, 2: two, 9: one})

        self.assertEqual(await methods.next_key(), 2)

        await methods.remove_value(2)
        self.assertEqual(await methods.next_key(), 5)

        await methods.remove_value(5)
        await methods.remove_value(9)
        self.assertIsNone(await methods.next_key())

    async def test_remove_callback(self):

        remaining = []
        methods = MethodList({1: one, 2: two}, remove_callback=remaining.append)

        await methods.remove_value(1)
        # missing keys still report
        await methods.remove_value(7)

        later = []
        await methods.set_remove_callback(later.append)
        await methods.remove_value(2)

        self.assertEqual(remaining, [1, 1])
        self.assertEqual(later, [0])


if __name__ == '__main__':
    import unittest
    unittest.main()

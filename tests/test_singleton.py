import unittest
import sys
import os
import threading
import time
from unittest import mock

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cinema.core.config_loader import ConfigLoader
from cinema.core.singleton import Singleton
from cinema.managers.ticket_registry import SharedTicketRegistry, TicketRegistry, get_instance


class SlowSingleton(Singleton):
    """Test-only singleton that takes a while to build"""
    constructions = 0

    def __init__(self):
        type(self).constructions += 1
        time.sleep(0.01)


class ChildSingleton(SlowSingleton):
    pass


class TestSingleton(unittest.TestCase):
    def setUp(self):
        SlowSingleton.reset_instance()
        ChildSingleton.reset_instance()
        SlowSingleton.constructions = 0

    def test_instance_is_shared(self):
        first = SlowSingleton.instance()
        second = SlowSingleton.instance()
        self.assertIs(first, second)
        self.assertIs(first, SlowSingleton())
        self.assertEqual(SlowSingleton.constructions, 1)

    def test_concurrent_first_access_builds_once(self):
        results = []
        barrier = threading.Barrier(16)

        def worker():
            barrier.wait()
            results.append(SlowSingleton.instance())

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(results), 16)
        self.assertTrue(all(r is results[0] for r in results))
        self.assertEqual(SlowSingleton.constructions, 1)

    def test_subclass_gets_its_own_instance(self):
        parent = SlowSingleton.instance()
        child = ChildSingleton.instance()
        self.assertIsNot(parent, child)
        self.assertIsInstance(child, ChildSingleton)

    def test_reset_instance(self):
        first = SlowSingleton.instance()
        self.assertTrue(SlowSingleton.has_instance())
        SlowSingleton.reset_instance()
        self.assertFalse(SlowSingleton.has_instance())
        self.assertIsNot(first, SlowSingleton.instance())


class TestSharedTicketRegistry(unittest.TestCase):
    def setUp(self):
        SharedTicketRegistry.reset_instance()
        self.addCleanup(SharedTicketRegistry.reset_instance)

    def test_get_instance_returns_same_registry(self):
        with mock.patch.object(ConfigLoader, 'get_capacity', return_value=10):
            box_office = get_instance()
            online = get_instance()
        self.assertIs(box_office, online)
        self.assertEqual(box_office.capacity, 10)
        self.assertIsInstance(box_office, TicketRegistry)

    def test_concurrent_get_instance_constructs_one_registry(self):
        results = []
        barrier = threading.Barrier(20)

        def worker():
            barrier.wait()
            results.append(get_instance())

        with mock.patch.object(ConfigLoader, 'get_capacity', return_value=10) as get_capacity:
            threads = [threading.Thread(target=worker) for _ in range(20)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        self.assertEqual(len(results), 20)
        self.assertTrue(all(r is results[0] for r in results))
        get_capacity.assert_called_once()

    def test_explicit_capacity_on_first_access(self):
        registry = get_instance(3)
        self.assertEqual(registry.capacity, 3)
        # later arguments do not rebuild the registry
        self.assertIs(get_instance(7), registry)
        self.assertEqual(get_instance().capacity, 3)

    def test_sales_visible_through_every_reference(self):
        first = get_instance(2)
        second = get_instance()
        first.sell("Alice", "box_office")
        self.assertEqual(second.sold, 1)

    def test_plain_registries_are_independent(self):
        shared = get_instance(5)
        fresh = TicketRegistry(5)
        self.assertIsNot(shared, fresh)
        fresh.sell("Alice", "online")
        self.assertEqual(shared.sold, 0)


if __name__ == '__main__':
    unittest.main()

"""
Tests for the Sampler Registry.

Tests cover:
- Registry creation and basic operations
- Registration and lookup
- Error handling
- Singleton default registry
- Resolving names, classes and instances
"""

import unittest

from Picto_Libs.ProcessingLib.sampler import Gaussian, Lanczos3, Linear, Nearest
from Picto_Libs.ProcessingLib.sampler_registry import (
    SamplerRegistry,
    get_default_registry,
    register_default_samplers,
    resolve_sampler,
)
from Picto_Libs.errors import InvalidArgument


class TestSamplerRegistry(unittest.TestCase):
    """Test SamplerRegistry basic functionality."""

    def setUp(self):
        """Create a fresh registry for each test."""
        self.registry = SamplerRegistry()

    def test_registry_creation(self):
        self.assertEqual(len(self.registry.list_samplers()), 0)

    def test_register_sampler(self):
        self.registry.register("Linear", Linear)

        self.assertTrue(self.registry.has_sampler("linear"))
        self.assertTrue(self.registry.has_sampler(" LINEAR "))
        self.assertIn("linear", self.registry.list_samplers())

    def test_get_sampler_builds_instance(self):
        self.registry.register("gaussian", Gaussian)

        sampler = self.registry.get_sampler("gaussian", sigma=1.0)

        self.assertIsInstance(sampler, Gaussian)
        self.assertEqual(sampler.sigma, 1.0)

    def test_default_names_come_from_classes(self):
        register_default_samplers(self.registry)

        self.assertTrue(self.registry.has_sampler("Lanczos3"))
        self.assertIsInstance(self.registry.get_sampler("lanczos3"), Lanczos3)

    def test_duplicate_registration(self):
        self.registry.register("linear", Linear)
        with self.assertRaises(RuntimeError):
            self.registry.register("linear", Linear)

    def test_empty_name(self):
        with self.assertRaises(ValueError):
            self.registry.register("  ", Linear)

    def test_not_callable(self):
        with self.assertRaises(ValueError):
            self.registry.register("bogus", 42)

    def test_unknown_sampler(self):
        with self.assertRaises(KeyError):
            self.registry.get_sampler("bicubic")

    def test_unregister(self):
        self.registry.register("linear", Linear)

        self.assertTrue(self.registry.unregister("linear"))
        self.assertFalse(self.registry.unregister("linear"))
        self.assertFalse(self.registry.has_sampler("linear"))


class TestDefaultRegistry(unittest.TestCase):
    """Test the global registry and resolution helper."""

    def test_singleton(self):
        self.assertIs(get_default_registry(), get_default_registry())

    def test_default_samplers(self):
        self.assertEqual(
            get_default_registry().list_samplers(),
            ["cubic", "gaussian", "lanczos2", "lanczos3", "linear", "nearest"],
        )

    def test_resolve_name(self):
        self.assertIsInstance(resolve_sampler("lanczos3"), Lanczos3)

    def test_resolve_class(self):
        self.assertIsInstance(resolve_sampler(Nearest), Nearest)

    def test_resolve_instance(self):
        sampler = Gaussian(sigma=0.8)
        self.assertIs(resolve_sampler(sampler), sampler)

    def test_resolve_unknown(self):
        with self.assertRaises(InvalidArgument):
            resolve_sampler("mitchell")
        with self.assertRaises(InvalidArgument):
            resolve_sampler(3)

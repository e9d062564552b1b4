import unittest
from unittest.mock import Mock, patch

from threat_entities.attributes import ATTRIBUTE_SCHEMA
from threat_entities.config import Settings
from threat_entities.errors import UnknownType
from threat_entities.models import DataKind, TypeBinding
from threat_entities.registry import (
    DEFAULT_BINDINGS,
    TypeRegistry,
    build_registry,
    get_default_registry,
)
from threat_entities.validators import VALIDATORS


def _entry_point(name, loaded=None, error=None):
    ep = Mock()
    ep.name = name
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = loaded
    return ep


class TestTypeRegistry(unittest.TestCase):
    def test_resolve_default_names(self):
        reg = get_default_registry()
        self.assertEqual(reg.resolve("ip"), DataKind.IP)
        self.assertEqual(reg.resolve("domain"), DataKind.FQDN)
        self.assertEqual(reg.resolve("sha3-256"), DataKind.SHA3_256)
        self.assertEqual(reg.resolve("object"), DataKind.IDENTIFIER)

    def test_unknown_type(self):
        with self.assertRaises(UnknownType) as ctx:
            get_default_registry().resolve("nonexistent")
        self.assertEqual(ctx.exception.type_name, "nonexistent")
        self.assertIsInstance(ctx.exception, LookupError)

    def test_lookup_is_case_sensitive(self):
        reg = get_default_registry()
        self.assertIn("ip", reg)
        self.assertNotIn("IP", reg)

    def test_first_binding_wins(self):
        reg = TypeRegistry((TypeBinding("x", DataKind.IP), TypeBinding("x", DataKind.FQDN)))
        self.assertEqual(reg.resolve("x"), DataKind.IP)
        self.assertEqual(reg.list_names(), ["x"])
        self.assertEqual(len(reg), 1)

    def test_extend_keeps_existing_names(self):
        reg = get_default_registry().extend(
            [TypeBinding("ip", DataKind.STRING), TypeBinding("ioc", DataKind.IDENTIFIER)]
        )
        self.assertEqual(reg.resolve("ip"), DataKind.IP)
        self.assertEqual(reg.resolve("ioc"), DataKind.IDENTIFIER)
        self.assertNotIn("ioc", get_default_registry())

    def test_get_returns_binding_or_none(self):
        reg = get_default_registry()
        self.assertEqual(reg.get("port"), TypeBinding("port", DataKind.PORT))
        self.assertIsNone(reg.get("nonexistent"))


class TestDefaultBindings(unittest.TestCase):
    def test_every_attribute_is_bound_with_matching_shape(self):
        reg = get_default_registry()
        for name, shape in ATTRIBUTE_SCHEMA.items():
            with self.subTest(name=name):
                self.assertEqual(reg.resolve(name).shape, shape)

    def test_every_kind_has_a_validator(self):
        self.assertEqual(set(VALIDATORS), set(DataKind))

    def test_every_kind_has_a_default_name(self):
        bound = {b.kind for b in DEFAULT_BINDINGS}
        self.assertEqual(bound, set(DataKind))

    def test_names_unique(self):
        names = [b.name for b in DEFAULT_BINDINGS]
        self.assertEqual(len(names), len(set(names)))


class TestEntryPoints(unittest.TestCase):
    @patch("threat_entities.registry.metadata.entry_points")
    def test_loads_bindings_lists_and_factories(self, mock_eps):
        mock_eps.return_value = [
            _entry_point("single", TypeBinding("ioc", DataKind.IDENTIFIER)),
            _entry_point("many", [TypeBinding("asn-name", DataKind.STRING)]),
            _entry_point("factory", lambda: TypeBinding("sha", DataKind.SHA256)),
        ]

        loaded = TypeRegistry.load_entrypoints("test.group")

        mock_eps.assert_called_once_with(group="test.group")
        self.assertEqual([b.name for b in loaded], ["ioc", "asn-name", "sha"])

    @patch("threat_entities.registry.metadata.entry_points")
    def test_broken_plugins_are_skipped(self, mock_eps):
        mock_eps.return_value = [
            _entry_point("broken", error=ImportError("boom")),
            _entry_point("bogus", "not a binding"),
            _entry_point("ok", TypeBinding("ioc", DataKind.IDENTIFIER)),
        ]

        with self.assertLogs("threat_entities.registry", level="WARNING") as logs:
            loaded = TypeRegistry.load_entrypoints("test.group")

        self.assertEqual(loaded, [TypeBinding("ioc", DataKind.IDENTIFIER)])
        self.assertEqual(len(logs.records), 2)

    @patch("threat_entities.registry.TypeRegistry.load_entrypoints")
    def test_build_registry_honours_settings(self, mock_load):
        mock_load.return_value = [TypeBinding("ioc", DataKind.IDENTIFIER)]

        self.assertIs(build_registry(Settings()), get_default_registry())
        mock_load.assert_not_called()

        reg = build_registry(Settings(load_plugins=True, plugin_group="custom.group"))
        mock_load.assert_called_once_with("custom.group")
        self.assertEqual(reg.resolve("ioc"), DataKind.IDENTIFIER)
        self.assertEqual(reg.resolve("ip"), DataKind.IP)


if __name__ == "__main__":
    unittest.main()

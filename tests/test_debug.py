"""Component switches of the debug logger."""
import unittest

from debug import COMPONENTS, Debug


class TestDebug(unittest.TestCase):

    def setUp(self):
        self.dbg = Debug()
        self.saved = self.dbg.status()

    def tearDown(self):
        for name, on in self.saved.items():
            (self.dbg.enable if on else self.dbg.disable)(name)
        self.dbg.toggle_global(True)

    def test_component_names(self):
        self.assertEqual(set(self.saved), set(COMPONENTS))

    def test_switches_are_shared(self):
        self.dbg.enable("stepping")
        self.assertTrue(Debug().is_on("stepping"))
        self.dbg.toggle("stepping")
        self.assertFalse(Debug().is_on("stepping"))

    def test_global_switch(self):
        self.dbg.enable("signal")
        self.dbg.toggle_global(False)
        self.assertFalse(self.dbg.is_on("signal"))

    def test_unknown_component(self):
        with self.assertRaises(ValueError):
            self.dbg.enable("lampboard")

    def test_log_reaches_logger(self):
        self.dbg.enable("config")
        with self.assertLogs("ENIGMA", level="DEBUG") as cm:
            self.dbg.log("config", "slots %s", ["B", "I"])
        self.assertIn("[CONFIG] slots ['B', 'I']", cm.output[0])


if __name__ == "__main__":
    unittest.main()

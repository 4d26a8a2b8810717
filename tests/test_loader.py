import json
import tempfile
import unittest
from pathlib import Path

from adventure.core.aliases import DEFAULT_ALIASES
from adventure.core.config import SAMPLE_WORLD, ConfigError, load_config, load_yaml
from adventure.core.loader import WorldError, load_world, parse_world, validate_world


class LoaderTests(unittest.TestCase):
    def setUp(self):
        self.base_world = json.loads(SAMPLE_WORLD.read_text(encoding="utf-8"))

    def copy(self):
        return json.loads(json.dumps(self.base_world))

    def test_sample_world_loads(self):
        world = load_world(SAMPLE_WORLD)
        self.assertEqual(world.starting_room, 1)
        self.assertEqual(sorted(world.rooms), [1, 2, 3, 4])
        self.assertTrue(world.rooms[1].paths["north"].locked)
        key = world.rooms[1].items.find("key")
        self.assertEqual(key.use_effects["cellarDoor"].originating_room, 1)
        self.assertIsNone(world.rooms[1].items.find("candle").use_effects)
        self.assertEqual(world.rooms[1].characters, [])

    def test_defaults_for_optional_fields(self):
        world = parse_world(
            {
                "startingRoom": 7,
                "rooms": [{"id": 7, "description": "Bare.", "items": [{"name": "pebble"}]}],
            }
        )
        room = world.rooms[7]
        self.assertEqual(room.paths, {})
        self.assertEqual(room.items.find("pebble").description, "")

    def test_validation_errors(self):
        # not an object
        with self.assertRaises(WorldError):
            validate_world([])

        # starting room missing
        bad = self.copy()
        bad["startingRoom"] = 99
        with self.assertRaises(WorldError):
            validate_world(bad)

        # starting room not an integer
        bad = self.copy()
        bad["startingRoom"] = "1"
        with self.assertRaises(WorldError):
            validate_world(bad)

        # duplicate room id
        bad = self.copy()
        bad["rooms"][1]["id"] = 1
        with self.assertRaises(WorldError):
            validate_world(bad)

        # dangling path
        bad = self.copy()
        bad["rooms"][0]["paths"]["north"]["roomID"] = 42
        with self.assertRaises(WorldError):
            validate_world(bad)

        # path without target
        bad = self.copy()
        del bad["rooms"][0]["paths"]["east"]["roomID"]
        with self.assertRaises(WorldError):
            validate_world(bad)

        # item without name
        bad = self.copy()
        del bad["rooms"][0]["items"][1]["name"]
        with self.assertRaises(WorldError):
            validate_world(bad)

        # effect without action
        bad = self.copy()
        del bad["rooms"][0]["items"][0]["useEffects"]["cellarDoor"]["action"]
        with self.assertRaises(WorldError):
            validate_world(bad)

        # room without description
        bad = self.copy()
        del bad["rooms"][3]["description"]
        with self.assertRaises(WorldError):
            validate_world(bad)

        # null items
        bad = self.copy()
        bad["rooms"][0]["items"] = None
        with self.assertRaises(WorldError):
            validate_world(bad)

        # path target not an integer
        bad = self.copy()
        bad["rooms"][0]["paths"]["north"]["roomID"] = [2]
        with self.assertRaises(WorldError):
            validate_world(bad)

        # effect room not an integer
        bad = self.copy()
        bad["rooms"][0]["items"][0]["useEffects"]["cellarDoor"]["originatingRoomID"] = [1]
        with self.assertRaises(WorldError):
            validate_world(bad)

        # lock flag given as a string
        bad = self.copy()
        bad["rooms"][0]["paths"]["north"]["isLocked"] = "false"
        with self.assertRaises(WorldError):
            validate_world(bad)

        # description not a string
        bad = self.copy()
        bad["rooms"][0]["description"] = 5
        with self.assertRaises(WorldError):
            validate_world(bad)

        # effect message not a string
        bad = self.copy()
        bad["rooms"][0]["items"][0]["useEffects"]["cellarDoor"]["message"] = 7
        with self.assertRaises(WorldError):
            validate_world(bad)

        # characters not a list
        bad = self.copy()
        bad["rooms"][1]["characters"] = {"name": "old guard"}
        with self.assertRaises(WorldError):
            validate_world(bad)

    def test_null_optional_text_defaults_to_empty(self):
        world = parse_world(
            {
                "startingRoom": 1,
                "rooms": [
                    {
                        "id": 1,
                        "description": "Bare.",
                        "items": [{"name": "pebble", "description": None}],
                        "characters": [{"name": "ghost", "dialogue": None}],
                    }
                ],
            }
        )
        self.assertEqual(world.rooms[1].items.find("pebble").description, "")
        self.assertEqual(world.rooms[1].find_character("ghost").dialogue, "")

    def test_effect_bound_to_unknown_room_only_warns(self):
        data = self.copy()
        data["rooms"][0]["items"][0]["useEffects"]["cellarDoor"]["originatingRoomID"] = 99
        with self.assertLogs("adventure.core.loader", level="WARNING"):
            parse_world(data)

    def test_malformed_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_world(path)

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_world("/nonexistent/world.json")


class ConfigTests(unittest.TestCase):
    def test_relative_world_path_and_aliases(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg_path = Path(tmp) / "adventure.yaml"
            cfg_path.write_text(
                "world:\n  path: worlds/mine.json\naliases:\n  l: look\nlogging:\n  level: debug\n",
                encoding="utf-8",
            )
            cfg = load_config(cfg_path)
            self.assertEqual(Path(cfg.world_path), (Path(tmp) / "worlds" / "mine.json").resolve())
            self.assertEqual(cfg.aliases["l"], "look")
            self.assertEqual(cfg.aliases["inv"], "inventory")
            self.assertEqual(cfg.log_level, "DEBUG")

    def test_empty_config_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg_path = Path(tmp) / "adventure.yaml"
            cfg_path.write_text("", encoding="utf-8")
            cfg = load_config(cfg_path)
            self.assertEqual(cfg.world_path, str(SAMPLE_WORLD))
            self.assertEqual(cfg.aliases, DEFAULT_ALIASES)
            self.assertEqual(cfg.log_level, "WARNING")

    def test_missing_config(self):
        with self.assertRaises(FileNotFoundError):
            load_yaml("/nonexistent/adventure.yaml")

    def test_malformed_config_shapes(self):
        cases = [
            "- just\n- a list\n",
            "plain scalar\n",
            "world: somewhere.json\n",
            "world:\n  path: [a, b]\n",
            "aliases: [l, look]\n",
            "logging:\n  level: chatty\n",
        ]
        with tempfile.TemporaryDirectory() as tmp:
            cfg_path = Path(tmp) / "adventure.yaml"
            for text in cases:
                cfg_path.write_text(text, encoding="utf-8")
                with self.subTest(text=text), self.assertRaises(ConfigError):
                    load_config(cfg_path)


if __name__ == "__main__":
    unittest.main()

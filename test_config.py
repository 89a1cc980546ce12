import os
import shutil
import tempfile
import unittest
from unittest import mock

import yaml

from nighttrain.config import load_config, toggle_debug

CLEAN_ENV = {
    "NIGHT_TRAIN_DEBUG": "",
    "NIGHT_TRAIN_AUDIO": "",
    "NIGHT_TRAIN_TEXT_SPEED": "",
}


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp, "config.yaml")

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def test_default_file_is_created(self):
        with mock.patch.dict(os.environ, CLEAN_ENV):
            config = load_config(self.path)

        self.assertTrue(os.path.exists(self.path))
        self.assertEqual(config['campaign'], "night_train")
        self.assertFalse(config['debug_mode'])
        self.assertEqual(config['text_speed'], 0.015)

    def test_file_values_fill_in_defaults(self):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("text_speed: 0\n")
        with mock.patch.dict(os.environ, CLEAN_ENV):
            config = load_config(self.path)
        self.assertEqual(config['text_speed'], 0)
        self.assertFalse(config['audio'])

    def test_environment_overrides_file(self):
        env = dict(CLEAN_ENV, NIGHT_TRAIN_DEBUG="yes", NIGHT_TRAIN_TEXT_SPEED="0.5")
        with mock.patch.dict(os.environ, env):
            config = load_config(self.path)
        self.assertTrue(config['debug_mode'])
        self.assertEqual(config['text_speed'], 0.5)

    def test_bad_number_keeps_file_value(self):
        env = dict(CLEAN_ENV, NIGHT_TRAIN_TEXT_SPEED="fast")
        with mock.patch.dict(os.environ, env):
            config = load_config(self.path)
        self.assertEqual(config['text_speed'], 0.015)

    def test_bad_number_is_logged(self):
        env = dict(CLEAN_ENV, NIGHT_TRAIN_TEXT_SPEED="fast")
        with mock.patch.dict(os.environ, env):
            with self.assertLogs("nighttrain.config", level="WARNING") as logs:
                load_config(self.path)
        self.assertIn("NIGHT_TRAIN_TEXT_SPEED", logs.output[0])

    def test_toggle_debug_writes_back(self):
        with mock.patch.dict(os.environ, CLEAN_ENV):
            config = load_config(self.path)
            self.assertTrue(toggle_debug(config, self.path))

        with open(self.path, "r", encoding="utf-8") as f:
            self.assertTrue(yaml.safe_load(f)['debug_mode'])


if __name__ == '__main__':
    unittest.main()

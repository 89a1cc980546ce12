import os
import shutil
import tempfile
import unittest

import yaml

from nighttrain.campaign import CAMPAIGN_BASE_PATH, CampaignError, load_campaign
from nighttrain.story_data import CHAPTER_SCENES


class TestLoadCampaign(unittest.TestCase):
    def test_bundled_campaign(self):
        campaign = load_campaign()

        self.assertEqual(campaign['manifest']['title'], "Night Train")
        for number, scene_ids in CHAPTER_SCENES.items():
            chapter = campaign['manifest']['chapters'][number]
            self.assertIn(chapter['start_scene'], scene_ids)
            for scene_id in scene_ids:
                self.assertTrue(campaign['scenes'][scene_id]['description'])

    def test_intro_lines_are_normalized(self):
        intro = load_campaign()['manifest']['chapters'][1]['intro']
        self.assertEqual(intro[0], ("You wake up in a locked train compartment. The train is moving. You are alone.", False))
        self.assertEqual(intro[-1], ('Type "help" for commands.', True))


class TestBrokenCampaigns(unittest.TestCase):
    def setUp(self):
        self.base = tempfile.mkdtemp()
        shutil.copytree(os.path.join(CAMPAIGN_BASE_PATH, "night_train"), os.path.join(self.base, "copy"))

    def tearDown(self):
        shutil.rmtree(self.base)

    def _rewrite(self, filename, mutate):
        path = os.path.join(self.base, "copy", filename)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        mutate(data)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)

    def test_missing_campaign(self):
        with self.assertRaises(FileNotFoundError):
            load_campaign("nowhere", base_path=self.base)

    def test_missing_scene(self):
        self._rewrite("scenes.yaml", lambda data: data.pop("clock-area"))
        with self.assertRaises(CampaignError):
            load_campaign("copy", base_path=self.base)

    def test_scene_in_wrong_chapter(self):
        self._rewrite("scenes.yaml", lambda data: data["platform"].update({"chapter": 1}))
        with self.assertRaises(CampaignError):
            load_campaign("copy", base_path=self.base)

    def test_bad_start_scene(self):
        self._rewrite("manifest.yaml", lambda data: data["chapters"][2].update({"start_scene": "scene1"}))
        with self.assertRaises(CampaignError):
            load_campaign("copy", base_path=self.base)

    def test_malformed_yaml(self):
        with open(os.path.join(self.base, "copy", "scenes.yaml"), "w", encoding="utf-8") as f:
            f.write("platform: [unclosed\n")
        with self.assertRaises(yaml.YAMLError):
            load_campaign("copy", base_path=self.base)


if __name__ == '__main__':
    unittest.main()

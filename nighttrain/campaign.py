import os

import yaml

from nighttrain.story_data import CHAPTER_SCENES

CAMPAIGN_BASE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "campaigns")
DEFAULT_CAMPAIGN_ID = "night_train"


class CampaignError(Exception):
    pass


def load_campaign(campaign_id=DEFAULT_CAMPAIGN_ID, base_path=CAMPAIGN_BASE_PATH):
    """
    Loads and merges the YAML files for a given campaign ID.
    Raises FileNotFoundError / yaml.YAMLError straight from the loader and
    CampaignError when the files parse but do not describe a playable story.
    """
    campaign_path = os.path.join(base_path, campaign_id)

    campaign_db = {
        'manifest': {},
        'scenes': {},
    }

    # Load Manifest (Title, Chapters, Intros)
    with open(os.path.join(campaign_path, "manifest.yaml"), "r", encoding="utf-8") as f:
        campaign_db['manifest'] = yaml.safe_load(f) or {}

    # Load Scenes (Look descriptions)
    with open(os.path.join(campaign_path, "scenes.yaml"), "r", encoding="utf-8") as f:
        campaign_db['scenes'] = yaml.safe_load(f) or {}

    _validate(campaign_db)

    for chapter in campaign_db['manifest']['chapters'].values():
        chapter['intro'] = [_normalize_line(line) for line in chapter.get('intro', [])]

    return campaign_db


def _validate(campaign_db):
    chapters = campaign_db['manifest'].get('chapters')
    if not isinstance(chapters, dict):
        raise CampaignError("manifest.yaml must define 'chapters'")

    for number, scene_ids in CHAPTER_SCENES.items():
        if number not in chapters:
            raise CampaignError(f"manifest.yaml is missing chapter {number}")
        start = chapters[number].get('start_scene')
        if start not in scene_ids:
            raise CampaignError(f"Chapter {number} starts in unknown scene '{start}'")

        for scene_id in scene_ids:
            scene = campaign_db['scenes'].get(scene_id)
            if not scene or not scene.get('description'):
                raise CampaignError(f"scenes.yaml has no description for '{scene_id}'")
            if scene.get('chapter') != number:
                raise CampaignError(f"Scene '{scene_id}' belongs to chapter {number}")


def _normalize_line(line):
    """Intro lines are plain strings or {text, instant} mappings."""
    if isinstance(line, dict):
        return line.get('text', ""), bool(line.get('instant', False))
    if line is None:
        return "", False
    return str(line), False

import logging
import os

import yaml
from dotenv import load_dotenv

CONFIG_PATH = "config.yaml"

logger = logging.getLogger(__name__)

DEFAULT_YAML = """
# NIGHT TRAIN CONFIGURATION
# -------------------------
# text_speed is the delay between typed characters in seconds (0 = instant).
# audio rings the terminal bell when a lock opens.

campaign: night_train
text_speed: 0.015
audio: false
debug_mode: false
"""

DEFAULTS = yaml.safe_load(DEFAULT_YAML)

# Environment variable -> (config key, parser)
ENV_OVERRIDES = {
    "NIGHT_TRAIN_DEBUG": ("debug_mode", lambda v: v.strip().lower() in ("1", "true", "yes", "on")),
    "NIGHT_TRAIN_AUDIO": ("audio", lambda v: v.strip().lower() in ("1", "true", "yes", "on")),
    "NIGHT_TRAIN_TEXT_SPEED": ("text_speed", float),
}


def load_config(config_path=CONFIG_PATH):
    """
    Loads config.yaml or creates default if missing.
    Values from the environment (or a .env file) win over the file.
    """
    if not os.path.exists(config_path):
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_YAML.strip() + "\n")

    with open(config_path, "r", encoding="utf-8") as f:
        config = dict(DEFAULTS)
        config.update(yaml.safe_load(f) or {})

    load_dotenv()
    for env_name, (key, parse) in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            config[key] = parse(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r, keeping %s=%r", env_name, raw, key, config.get(key))

    return config


def toggle_debug(config, config_path=CONFIG_PATH):
    """Toggles the debug_mode flag in config.yaml."""
    config['debug_mode'] = not config.get('debug_mode', False)
    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False)
    return config['debug_mode']

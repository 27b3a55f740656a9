# === App Version ===
APP_VERSION = "1.0.0"

# === Page Defaults ===
DEFAULT_PAGE_SIZE = "A4"
DEFAULT_UNITS = "centimeter"
DEFAULT_MARGIN = 0.0  # 单位同 DEFAULT_UNITS

# === Font Settings ===
DEFAULT_FONT_NAME = "Helvetica"
DEFAULT_FONT_SIZE = 12
FALLBACK_FONT_NAME = "Helvetica"

# === Text Layout ===
DEFAULT_LINE_SPACING = 1.0
LINE_HEIGHT_FACTOR = 1.2  # 行高与字号之比（固定值）
DEFAULT_TEXT_ENCODING = "UTF-8"

# === Logging Settings ===
LOG_FILE = "app.log"
ERROR_LOG_FILE = "error.log"
LOG_LEVEL = "INFO"
LOG_DIR_ENV = "SIMPLEPAGE_LOG_DIR"
DEBUG_ENV = "SIMPLEPAGE_DEBUG"

# === Example Output ===
SAMPLE_TEXT = (
    "Lorem ipsum dolor sit amet, consectetur adipisicing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure "
    "dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. "
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt "
    "mollit anim id est laborum."
)
SAMPLE_OUTPUT_FILE = "example.pdf"

# === Preset Config Keys ===
PRESET_KEYS = [
    "page_size",
    "units",
    "margin",
    "font_name",
    "font_size",
    "line_spacing",
    "align",
]

import os
import json
import logging

CONFIG_FILE_NAME = ".simplepage_config.json"
CONFIG_DIR = os.path.expanduser("~/.simplepage")
CONFIG_PATH = os.path.join(CONFIG_DIR, CONFIG_FILE_NAME)

def save_settings(settings: dict, path: str = CONFIG_PATH):
    """保存用户设置到配置文件"""
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, ensure_ascii=False, indent=4)
    except OSError:
        logging.getLogger("SimplePage").error("配置保存失败", exc_info=True)

def load_settings(path: str = CONFIG_PATH) -> dict:
    """从配置文件加载用户设置"""
    try:
        if os.path.exists(path):
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
    except (OSError, ValueError):
        logging.getLogger("SimplePage").error("配置加载失败", exc_info=True)
    return {}


# === Settings Defaults & Compatibility ===
def apply_defaults(settings: dict) -> dict:
    """确保配置包含所有默认值（适用于旧版配置文件）"""
    defaults = {
        "page_size": DEFAULT_PAGE_SIZE,
        "units": DEFAULT_UNITS,
        "margin": DEFAULT_MARGIN,
        "font_name": DEFAULT_FONT_NAME,
        "font_size": DEFAULT_FONT_SIZE,
        "line_spacing": DEFAULT_LINE_SPACING,
        "align": "left",
    }
    for key, value in defaults.items():
        if key not in settings:
            settings[key] = value
        elif key in ["margin", "font_size", "line_spacing"]:
            try:
                settings[key] = float(settings[key])
            except (TypeError, ValueError):
                settings[key] = value
    # 非正数的字号和行距无意义
    for key in ["font_size", "line_spacing"]:
        if settings[key] <= 0:
            settings[key] = defaults[key]
    return settings

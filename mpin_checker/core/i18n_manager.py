import json
import logging
import os
from typing import Any, Dict, List, Optional

from mpin_checker.paths import get_resource_path
from mpin_checker.core.config_loader import ConfigLoader

logger = logging.getLogger(__name__)

DEFAULT_LANG = "EN"


class I18nManager:
    def __init__(self, lang_code: Optional[str] = None):
        self.config = ConfigLoader().config
        self.current_lang = lang_code or self.config.get("language", DEFAULT_LANG)
        self.translations: Dict[str, Any] = {}
        self.load_language(self.current_lang)

    def load_language(self, lang_code: str):
        """Load specific language JSON"""
        # Path: resources/i18n/{LANG}/text/{LANG}.json
        relative_path = f"i18n/{lang_code}/text/{lang_code}.json"
        path = get_resource_path(relative_path)

        if not os.path.exists(path):
            logger.warning("Language file not found: %s (falling back to %s)", path, DEFAULT_LANG)
            if lang_code != DEFAULT_LANG:
                self.load_language(DEFAULT_LANG)
            return

        try:
            with open(path, "r", encoding="utf-8") as f:
                self.translations = json.load(f)
            self.current_lang = lang_code
        except (OSError, ValueError) as e:
            logger.error("Failed to load language %s: %s", lang_code, e)

    def _lookup(self, key: str) -> Any:
        val: Any = self.translations
        for k in key.split("."):
            if not isinstance(val, dict):
                return None
            val = val.get(k)
            if val is None:
                return None
        return val

    def get(self, key: str, **kwargs) -> str:
        """
        Get translated string by key (e.g. "reason.COMMONLY_USED").
        Supports formatting (e.g. {score}).
        """
        val = self._lookup(key)
        if val is None:
            return f"MISSING:{key}"

        if isinstance(val, str):
            if kwargs:
                try:
                    return val.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    # Return unformatted rather than failing the report
                    return val
            return val
        return str(val)

    def get_list(self, key: str) -> List[str]:
        """Get a list of strings (e.g. "recommendations"). Empty when missing."""
        val = self._lookup(key)
        if isinstance(val, list):
            return [str(v) for v in val]
        return []

    def describe_reason(self, code: str) -> str:
        """Human-readable description of a weakness reason code; the code itself if unknown."""
        val = self._lookup(f"reason.{code}")
        return val if isinstance(val, str) else code

    def describe_pattern(self, label: str) -> str:
        """Localized pattern label; the label itself if unknown."""
        val = self._lookup("pattern")
        if isinstance(val, dict) and isinstance(val.get(label), str):
            return val[label]
        return label

    def set_language(self, lang_code: str):
        self.load_language(lang_code)

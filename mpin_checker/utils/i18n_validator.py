import os
import json
import sys
from glob import glob

from mpin_checker.paths import get_resource_path


def get_all_keys(data, parent_key=""):
    """Recursively get all keys from a nested dictionary."""
    keys = []
    for k, v in data.items():
        full_key = f"{parent_key}.{k}" if parent_key else k
        if isinstance(v, dict):
            keys.extend(get_all_keys(v, full_key))
        else:
            keys.append(full_key)
    return keys


def _load(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def find_missing_keys(base_lang="EN", i18n_dir=None):
    """
    Compare every language file against the base language.

    Returns:
        dict: {lang_code: sorted list of keys missing from that language}.
              Languages with no missing keys map to an empty list.

    Raises:
        FileNotFoundError: the base language file does not exist.
    """
    i18n_dir = i18n_dir or get_resource_path("i18n")
    base_file = os.path.join(i18n_dir, base_lang, "text", f"{base_lang}.json")
    base_keys = set(get_all_keys(_load(base_file)))

    result = {}
    # Structure: resources/i18n/{LANG}/text/{LANG}.json
    for d in sorted(glob(os.path.join(i18n_dir, "*"))):
        if not os.path.isdir(d):
            continue

        lang_code = os.path.basename(d)
        if lang_code == base_lang:
            continue

        target_file = os.path.join(d, "text", f"{lang_code}.json")
        if not os.path.exists(target_file):
            print(f"WARNING: No text file found for {lang_code} at {target_file}")
            continue

        target_keys = set(get_all_keys(_load(target_file)))
        result[lang_code] = sorted(base_keys - target_keys)

    return result


def validate_i18n(base_lang="EN"):
    """
    Validate that all language files match the keys present in the base language.
    """
    try:
        missing_by_lang = find_missing_keys(base_lang)
    except (OSError, ValueError) as e:
        print(f"ERROR: Failed to load language files: {e}")
        return False

    all_valid = True
    for lang_code, missing in missing_by_lang.items():
        if missing:
            print(f"ERROR: {lang_code} is missing {len(missing)} keys:")
            for k in missing[:5]:
                print(f"  - {k}")
            if len(missing) > 5:
                print("  ... and more")
            all_valid = False
        else:
            print(f"OK: {lang_code}")

    return all_valid


if __name__ == "__main__":
    if validate_i18n():
        print("\nSUCCESS: All I18n files are valid.")
        sys.exit(0)
    else:
        print("\nFAILURE: Missing keys detected.")
        sys.exit(1)

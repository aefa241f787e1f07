import io
import json
import os
from typing import Optional
import yaml


def load_config_file(file: str, raise_exception: bool = True) -> Optional[dict]:
    """
    Loads and returns the (dictionary) contents of the given YAML (.yaml or .yml suffix) or JSON file.
    Returns None if the file does not exist or cannot be loaded and raise_exception is False.
    """
    if isinstance(file, str) and os.path.isfile(file := os.path.expanduser(file)):
        try:
            with io.open(file, "r") as f:
                if file.endswith(".yaml") or file.endswith(".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
            return data if isinstance(data, dict) else {}
        except Exception as e:
            if raise_exception is True:
                raise e
        return None
    if raise_exception is True:
        raise FileNotFoundError(f"Cannot find file: {file}")
    return None

"""Load generator runs from JSON or YAML config files.

A config file is either a bare list of libraries, or a mapping::

    context: ../frontend            # base directory (alias: cwd)
    clientLibRoot: ui.apps/src/main/content/jcr_root/etc/clientlibs
    libs:
      - name: site.base
        assets:
          js: [dist/vendor.js, dist/base.js]
      - name: site.publish
        embed: [site.base]
        mode: json
        assets:
          css:
            base: styles
            files:
              - src: dist/site.css
                dest: site.min.css

A relative (or missing) base directory resolves against the folder that
holds the config file.
"""

import json
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from clientlib_common import ConfigurationError, get_logger

from clientlib_generator.models import GeneratorConfig, GeneratorOptions, LibraryItem

logger = get_logger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}


def read_config_data(path: Path) -> Any:
    """Parse ``path`` as YAML (``.yml``/``.yaml``) or JSON."""
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file '{path}': {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot parse config file '{path}': {e}") from e


def parse_config(data: Any, config_dir: Path) -> GeneratorConfig:
    """Build a ``GeneratorConfig`` from parsed file content.

    Raises:
        ConfigurationError: If the content has the wrong shape
    """
    if isinstance(data, list):
        data = {"libs": data}
    if not isinstance(data, dict):
        raise ConfigurationError("Config must be a list of libraries or a mapping with 'libs'")
    if "libs" not in data:
        raise ConfigurationError("Config mapping has no 'libs' entry")

    option_data = {key: value for key, value in data.items() if key != "libs"}
    if "context" in option_data and "cwd" not in option_data:
        option_data["cwd"] = option_data.pop("context")

    try:
        options = GeneratorOptions.model_validate(option_data)
        libs = [LibraryItem.model_validate(lib) for lib in data["libs"] or []]
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config: {e}") from e

    cwd = config_dir if options.cwd is None else config_dir / options.cwd
    options = options.model_copy(update={"cwd": cwd})
    return GeneratorConfig(libs=libs, options=options)


def load_config(path: Union[str, Path]) -> GeneratorConfig:
    """Load a generator config file.

    Args:
        path: JSON or YAML config file

    Returns:
        GeneratorConfig with ``options.cwd`` resolved against the file's folder

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid
    """
    config_path = Path(path).expanduser().absolute()
    data = read_config_data(config_path)
    config = parse_config(data, config_path.parent)
    config.source = config_path

    logger.debug("config_loaded", path=str(config_path), libraries=len(config.libs))
    return config

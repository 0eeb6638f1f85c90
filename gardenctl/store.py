"""Reading and writing the gardenctl configuration file."""
import os
from pathlib import Path
from typing import BinaryIO

import yaml
from jsonschema import validate, ValidationError as SchemaValidationError

from gardenctl.errors import (
    DecodeError, EncodeError, PathResolutionError, StorageOpenError, StorageWriteError
)
from gardenctl.models import Config

FILE_MODE = 0o600

# any scalar is read as a string
_SCALAR = ["string", "number", "boolean", "null"]
_OPTIONAL_STRING = {"type": _SCALAR}
_OPTIONAL_STRING_LIST = {"type": ["array", "null"], "items": {"type": _SCALAR}}

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "gardens": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "properties": {
                    "name": _OPTIONAL_STRING,
                    "identity": _OPTIONAL_STRING,
                    "context": _OPTIONAL_STRING,
                    "kubeconfig": _OPTIONAL_STRING,
                    "aliases": _OPTIONAL_STRING_LIST,
                },
            },
        },
        "matchPatterns": _OPTIONAL_STRING_LIST,
    },
}


def expand_home(path: str) -> str:
    """Resolve a leading ``~`` in path to the current user's home directory."""
    if not path or not path.startswith("~"):
        return path
    if len(path) > 1 and path[1] not in ("/", os.sep):
        raise PathResolutionError(f"cannot expand user-specific home dir in {path!r}")

    try:
        home = str(Path.home())
    except (RuntimeError, KeyError) as e:
        raise PathResolutionError(f"failed to determine home directory: {e}") from e
    if home == "~":
        raise PathResolutionError("failed to determine home directory")

    return home + path[1:]


def load(source: BinaryIO) -> Config:
    """Parse a gardenctl configuration from a binary stream.

    An empty stream yields an empty configuration. Kubeconfig paths are
    returned with ``~`` already expanded.
    """
    content = source.read()
    if not content:
        return Config()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DecodeError(f"failed to decode as YAML: {e}") from e

    if data is None:
        return Config()

    try:
        validate(instance=data, schema=CONFIG_SCHEMA)
    except SchemaValidationError as ve:
        raise DecodeError(f"failed to decode as YAML: {ve.message}") from ve

    config = Config.from_dict(data)

    # be nice and handle ~ in paths
    for garden in config.gardens:
        try:
            garden.kubeconfig = expand_home(garden.kubeconfig)
        except PathResolutionError as e:
            raise PathResolutionError(f"failed to resolve ~ in kubeconfig path: {e}") from e

    return config


def save(sink: BinaryIO, config: Config) -> None:
    """Write the whole configuration to a binary stream as YAML."""
    try:
        text = yaml.safe_dump(config.to_dict(), sort_keys=False, default_flow_style=False)
    except yaml.YAMLError as e:
        raise EncodeError(f"failed to encode as YAML: {e}") from e

    try:
        sink.write(text.encode("utf-8"))
    except OSError as e:
        raise StorageWriteError(f"failed to write configuration: {e}") from e


def load_from_file(filename: str) -> Config:
    """Load the configuration file. A missing file is an empty configuration."""
    try:
        with open(filename, "rb") as f:
            return load(f)
    except FileNotFoundError:
        return Config()
    except OSError as e:
        raise StorageOpenError(f"failed to open file {filename!r}: {e}") from e


def save_to_file(filename: str, config: Config) -> None:
    """Overwrite the configuration file, readable by the owner only."""
    try:
        parent = os.path.dirname(filename)
        if parent:
            os.makedirs(parent, exist_ok=True)
        fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    except OSError as e:
        raise StorageWriteError(f"failed to create file {filename!r}: {e}") from e

    try:
        with os.fdopen(fd, "wb") as f:
            # the mode passed to open only applies to new files
            os.fchmod(f.fileno(), FILE_MODE)
            save(f, config)
    except OSError as e:
        raise StorageWriteError(f"failed to write file {filename!r}: {e}") from e

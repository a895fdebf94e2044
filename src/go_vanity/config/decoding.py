"""Reading and decoding the vanity config file."""

from collections.abc import Hashable
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from go_vanity.core.exceptions import ConfigurationError
from go_vanity.core.models.vanity import VanityConfig

logger = structlog.get_logger(__name__)

# Plain scalars that yaml.v3 and YAML 1.2 treat as null.
NULL_SCALARS = frozenset({"", "~", "null", "Null", "NULL"})


class ConfigLoader(yaml.BaseLoader):
    """YAML loader that keeps scalars as the text written.

    ``1.10``, ``010`` and ``on`` stay strings instead of becoming YAML 1.1
    floats, octals and booleans; unquoted nulls become None. A key that
    appears twice in one mapping is an error.
    """

    def construct_scalar(self, node):
        value = super().construct_scalar(node)
        if node.style is None and value in NULL_SCALARS:
            return None
        return value

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if isinstance(key, Hashable):
                if key in seen:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"mapping key {key!r} already defined",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def read_config_file(path: str | Path) -> bytes:
    """Read the raw config bytes from disk."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ConfigurationError(
            f"failed to read the config: {e}",
            details={"config_path": str(path)},
        ) from e
    logger.debug("Config read", config_path=str(path), size=len(data))
    return data


def load_config(data: bytes | str) -> VanityConfig:
    """Decode a YAML config document.

    An empty document yields an empty config. Anything that is not a
    mapping at the top level, or does not match the schema, is rejected
    as a whole.
    """
    try:
        raw = yaml.load(data, Loader=ConfigLoader)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid YAML: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(
            "config must be a mapping with 'host' and 'paths'",
            details={"type": type(raw).__name__},
        )

    try:
        config = VanityConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"invalid config: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e

    logger.debug("Config decoded", host=config.host, paths=len(config.paths))
    return config

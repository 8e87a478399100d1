"""Factory for building schemas from configuration.
"""

import logging
from typing import Any, Callable, Dict, List

import yaml

from .builders import array, boolean, number, string
from .combinators import UnionMode, UnionSchema, code_scorer
from .containers import ObjectSchema
from .exceptions import SchemaDefinitionError
from .schema import Schema
from .transforms import get_transform

logger = logging.getLogger(__name__)

COMMON_OPTIONS = {"type", "optional", "transforms", "errors", "required", "name", "description"}


class SchemaFactory:
    """Factory for creating schemas from configuration.

    Configuration Options (all types):
        type (str): string, number, boolean, array, object or union
        optional (bool): Accept null / absent values (default: False)
        transforms (list): Built-in transform names applied in order
        errors (dict): Error code to message template overrides

    Type-specific Options:
        string: min_length, max_length, pattern, format (email/url/uuid/ip)
        number: min, max, integer, coerce
        boolean: coerce
        array: items (schema config), min_items, max_items
        object: fields (mapping or list of configs with 'name'), strict;
            each field config may set required (default: True)
        union: variants (list), mode (one_of/all_of/best_of),
            scores (code to rank, best_of only), default_score

    Example Configuration:
        type: object
        strict: true
        fields:
          username:
            type: string
            min_length: 3
            transforms: [trim, lowercase]
          age:
            type: number
            integer: true
            min: 13
            required: false
    """

    def __init__(self) -> None:
        self._builders: Dict[str, Callable[[Dict[str, Any]], Schema]] = {
            "string": self._build_string,
            "number": self._build_number,
            "boolean": self._build_boolean,
            "array": self._build_array,
            "object": self._build_object,
            "union": self._build_union,
        }
        self._options: Dict[str, set] = {
            "string": {"min_length", "max_length", "pattern", "format"},
            "number": {"min", "max", "integer", "coerce"},
            "boolean": {"coerce"},
            "array": {"items", "min_items", "max_items"},
            "object": {"fields", "strict"},
            "union": {"variants", "mode", "scores", "default_score"},
        }

    def create(self, **config: Any) -> Schema:
        """Create a Schema instance from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            SchemaDefinitionError: If the configuration is invalid
        """
        schema_type = str(config.get("type", "")).lower()
        builder = self._builders.get(schema_type)
        if builder is None:
            raise SchemaDefinitionError(
                f"Invalid schema type: {config.get('type')!r}",
                context={"type": config.get("type"), "available": sorted(self._builders)},
            )

        logger.info(f"Creating schema: {schema_type}")

        for key in config:
            if key not in COMMON_OPTIONS and key not in self._options[schema_type]:
                logger.warning(f"Unknown option '{key}' for {schema_type} schema, ignoring")

        schema = builder(config)
        self._apply_common(schema, config)
        return schema

    def from_yaml(self, text: str) -> Schema:
        """Create a Schema from a YAML document.

        Args:
            text: YAML text describing one schema

        Returns:
            Schema instance
        """
        config = yaml.safe_load(text)
        if not isinstance(config, dict):
            raise SchemaDefinitionError(
                "YAML schema definition must be a mapping",
                context={"actual": type(config).__name__},
            )
        return self.create(**config)

    def _apply_common(self, schema: Schema, config: Dict[str, Any]) -> None:
        if config.get("optional", False):
            schema.optional()
        for name in config.get("transforms", []):
            schema.transform(get_transform(name))
        for code, template in config.get("errors", {}).items():
            schema.error_message(code, template)

    def _build_string(self, config: Dict[str, Any]) -> Schema:
        schema = string()
        if config.get("min_length") is not None:
            schema.min_length(config["min_length"])
        if config.get("max_length") is not None:
            schema.max_length(config["max_length"])
        if config.get("format"):
            schema.format(config["format"])
        if config.get("pattern"):
            if config.get("format"):
                logger.warning("Both 'pattern' and 'format' given; 'pattern' replaces the format")
            schema.pattern(config["pattern"])
        return schema

    def _build_number(self, config: Dict[str, Any]) -> Schema:
        schema = number()
        if config.get("min") is not None:
            schema.min(config["min"])
        if config.get("max") is not None:
            schema.max(config["max"])
        if config.get("integer", False):
            schema.integer()
        if config.get("coerce", False):
            schema.coerce()
        return schema

    def _build_boolean(self, config: Dict[str, Any]) -> Schema:
        schema = boolean()
        if config.get("coerce", False):
            schema.coerce()
        return schema

    def _build_array(self, config: Dict[str, Any]) -> Schema:
        items = config.get("items")
        if not isinstance(items, dict):
            raise SchemaDefinitionError(
                "Array schema requires an 'items' schema configuration",
                context={"items": items},
            )
        schema = array(self.create(**items))
        if config.get("min_items") is not None:
            schema.min_items(config["min_items"])
        if config.get("max_items") is not None:
            schema.max_items(config["max_items"])
        return schema

    def _build_object(self, config: Dict[str, Any]) -> Schema:
        schema = ObjectSchema()
        for name, field_config in self._field_configs(config.get("fields", {})):
            schema.field(
                name,
                self.create(**field_config),
                required=field_config.get("required", True),
            )
        if config.get("strict", False):
            schema.strict()
        return schema

    def _field_configs(self, fields: Any) -> List[tuple]:
        if isinstance(fields, dict):
            return list(fields.items())
        configs = []
        for field_config in fields:
            name = field_config.get("name")
            if not name:
                logger.warning("Field configuration missing 'name', skipping")
                continue
            configs.append((name, field_config))
        return configs

    def _build_union(self, config: Dict[str, Any]) -> Schema:
        mode_name = config.get("mode", UnionMode.ONE_OF.value)
        try:
            mode = UnionMode(mode_name)
        except ValueError as e:
            raise SchemaDefinitionError(
                f"Invalid union mode: {mode_name!r}",
                context={"mode": mode_name, "available": [m.value for m in UnionMode]},
            ) from e

        variants = [self.create(**variant) for variant in config.get("variants", [])]
        scorer = None
        if "scores" in config:
            scorer = code_scorer(config["scores"], config.get("default_score", 0))
        return UnionSchema(variants, mode, scorer)


# Create singleton instance for registration
schema_factory = SchemaFactory()

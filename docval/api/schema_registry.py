"""Output schemas keyed by (domain, command), e.g. ("docs", "check")."""

from pydantic import BaseModel


class SchemaRegistry:
    def __init__(self) -> None:
        self._schemas: dict[tuple[str, str], type[BaseModel]] = {}

    def register_output_schema(self, domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
        key = (domain, command_name)
        existing = self._schemas.get(key)
        if existing is not None and existing is not schema_class:
            raise ValueError(f"Output schema for {domain}.{command_name} is already {existing.__name__}")
        self._schemas[key] = schema_class

    def get_output_schema(self, domain: str, command_name: str) -> type[BaseModel] | None:
        return self._schemas.get((domain, command_name))

    def __contains__(self, key: tuple[str, str]) -> bool:
        return key in self._schemas


schema_registry = SchemaRegistry()
